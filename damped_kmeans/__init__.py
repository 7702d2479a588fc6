from .core import KMeansBase, KMeansDamped, KMeansDirect, DampingConfig
from .data import Extent, PointSet, compute_extents, prepare_points
from .errors import InputShapeError, InvalidClusterCountError, KMeansError

__all__ = [
    "KMeansBase",
    "KMeansDamped",
    "KMeansDirect",
    "DampingConfig",
    "Extent",
    "PointSet",
    "compute_extents",
    "prepare_points",
    "KMeansError",
    "InputShapeError",
    "InvalidClusterCountError",
]
