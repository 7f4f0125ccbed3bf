from .version import __version__
from .CRN import (
    Node,
    HyperEdge,
    RangedHyperEdge,
    HyperGraph,
    FavoredPathFinder,
    favored_path,
    favored_path_high_weights,
    favored_path_low_weights,
)

__all__ = [
    "__version__",
    "Node",
    "HyperEdge",
    "RangedHyperEdge",
    "HyperGraph",
    "FavoredPathFinder",
    "favored_path",
    "favored_path_high_weights",
    "favored_path_low_weights",
]
