"""
Public API for :mod:`ppkit.CRN`.

Re-exported classes
-------------------
- :class:`~ppkit.CRN.Hypergraph.node.Node`
- :class:`~ppkit.CRN.Hypergraph.hyperedge.HyperEdge`
- :class:`~ppkit.CRN.Hypergraph.hyperedge.RangedHyperEdge`
- :class:`~ppkit.CRN.Hypergraph.hypergraph.HyperGraph`
- :class:`~ppkit.CRN.Pathway.favored.FavoredPathFinder`
"""

from __future__ import annotations
from typing import List

from .Hypergraph import Node, HyperEdge, RangedHyperEdge, HyperGraph
from .Pathway import (
    FavoredPathFinder,
    favored_path,
    favored_path_high_weights,
    favored_path_low_weights,
)

__all__: List[str] = [
    "Node",
    "HyperEdge",
    "RangedHyperEdge",
    "HyperGraph",
    "FavoredPathFinder",
    "favored_path",
    "favored_path_high_weights",
    "favored_path_low_weights",
]
