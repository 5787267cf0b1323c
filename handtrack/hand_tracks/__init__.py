"""Frame pipeline, vision primitives, capture and display."""

from .vision import Contour, VisionPrimitives, SkinThreshold, OpenCVVision
from .video_io import open_capture, read_frame, capture_properties, open_recorder
from .visualization import TrackerDisplay, draw_hand_overlay, draw_contour
from .pipeline import HandPipeline, FrameResult

__all__ = [
    "Contour",
    "VisionPrimitives",
    "SkinThreshold",
    "OpenCVVision",
    "open_capture",
    "read_frame",
    "capture_properties",
    "open_recorder",
    "TrackerDisplay",
    "draw_hand_overlay",
    "draw_contour",
    "HandPipeline",
    "FrameResult",
]
