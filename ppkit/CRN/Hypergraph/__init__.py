from .node import Node
from .hyperedge import HyperEdge, RangedHyperEdge
from .hypergraph import HyperGraph

__all__ = ["Node", "HyperEdge", "RangedHyperEdge", "HyperGraph"]
