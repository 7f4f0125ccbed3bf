from .favored import (
    FavoredPathFinder,
    favored_path,
    favored_path_high_weights,
    favored_path_low_weights,
    get_path,
    path_exists,
)

__all__ = [
    "FavoredPathFinder",
    "favored_path",
    "favored_path_high_weights",
    "favored_path_low_weights",
    "get_path",
    "path_exists",
]
