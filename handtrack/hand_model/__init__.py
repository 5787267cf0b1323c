"""Hand model derivation from contour geometry."""

from .config import NUM_FINGERS, MAX_FINGERS, MAX_DEFECTS
from .geometry import Point, squared_distance, truncating_sqrt, mean_point
from .defects import ConvexityDefect, DefectSummary, aggregate_defects
from .fingertips import detect_fingertips
from .model import HandModel, HandSnapshot

__all__ = [
    "NUM_FINGERS",
    "MAX_FINGERS",
    "MAX_DEFECTS",
    "Point",
    "squared_distance",
    "truncating_sqrt",
    "mean_point",
    "ConvexityDefect",
    "DefectSummary",
    "aggregate_defects",
    "detect_fingertips",
    "HandModel",
    "HandSnapshot",
]
