"""Contour-based hand tracking package."""

from .hand_model import (
    NUM_FINGERS,
    MAX_FINGERS,
    MAX_DEFECTS,
    ConvexityDefect,
    aggregate_defects,
    detect_fingertips,
    HandModel,
    HandSnapshot,
)

from .hand_tracks import (
    VisionPrimitives,
    OpenCVVision,
    HandPipeline,
    FrameResult,
    TrackerDisplay,
)

__version__ = "1.0.0"
__all__ = [
    # Hand model
    "NUM_FINGERS",
    "MAX_FINGERS",
    "MAX_DEFECTS",
    "ConvexityDefect",
    "aggregate_defects",
    "detect_fingertips",
    "HandModel",
    "HandSnapshot",
    # Tracking
    "VisionPrimitives",
    "OpenCVVision",
    "HandPipeline",
    "FrameResult",
    "TrackerDisplay",
]
