"""Camera/video capture and MJPG recording."""

import logging
from contextlib import contextmanager
from typing import Generator

import cv2
import numpy as np
from numpy.typing import NDArray

from ..hand_model.config import DEFAULT_FPS, VIDEO_FILE, VIDEO_FOURCC

logger = logging.getLogger(__name__)


@contextmanager
def open_capture(
    source: int | str = 0, width: int | None = None, height: int | None = None
) -> Generator[cv2.VideoCapture, None, None]:
    """Context manager for a camera index or video file."""
    cap = cv2.VideoCapture(source)
    if not cap.isOpened():
        raise RuntimeError(f"Failed to open capture source {source!r}")
    if width:
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    if height:
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    logger.info("Opened capture source %r", source)
    try:
        yield cap
    finally:
        cap.release()


def read_frame(cap: cv2.VideoCapture) -> NDArray[np.uint8] | None:
    """Read a frame from the capture."""
    ret, frame = cap.read()
    return frame if ret else None


def capture_properties(cap: cv2.VideoCapture) -> tuple[int, int, int]:
    """
    Frame rate and size reported by the capture.

    Returns:
        (fps, width, height), with fps falling back to DEFAULT_FPS when the
        device does not report one
    """
    fps = int(cap.get(cv2.CAP_PROP_FPS))
    if fps <= 0:
        fps = DEFAULT_FPS
    width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
    height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
    return fps, width, height


@contextmanager
def open_recorder(
    path: str = VIDEO_FILE,
    fps: int = DEFAULT_FPS,
    size: tuple[int, int] = (640, 480),
    fourcc: str = VIDEO_FOURCC,
) -> Generator[cv2.VideoWriter, None, None]:
    """Context manager for a color video writer."""
    writer = cv2.VideoWriter(path, cv2.VideoWriter_fourcc(*fourcc), fps, size, True)
    if not writer.isOpened():
        raise RuntimeError(f"Failed to open video writer for {path}")
    logger.info("Recording to %s (%s, %d fps, %dx%d)", path, fourcc, fps, *size)
    try:
        yield writer
    finally:
        writer.release()
