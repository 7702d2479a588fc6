from .points import Extent, PointSet, compute_extents, prepare_points
from .loader import read_points

__all__ = ["Extent", "PointSet", "compute_extents", "prepare_points", "read_points"]
