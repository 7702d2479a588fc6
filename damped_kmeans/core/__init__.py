from .base import KMeansBase, KMeansState
from .damped import DampingConfig, KMeansDamped
from .direct import KMeansDirect
from .distance import euclidean_distances, nearest_centroid

__all__ = [
    "KMeansBase",
    "KMeansState",
    "KMeansDamped",
    "KMeansDirect",
    "DampingConfig",
    "euclidean_distances",
    "nearest_centroid",
]
