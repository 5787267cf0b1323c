"""Per-frame hand tracking pipeline."""

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

import cv2
import numpy as np
from numpy.typing import NDArray

from ..hand_model import HandModel, HandSnapshot
from ..hand_model.config import MIN_CONTOUR_POINTS, QUIT_KEYS
from .video_io import read_frame
from .vision import Contour, VisionPrimitives
from .visualization import draw_hand_overlay

logger = logging.getLogger(__name__)


class FrameSink(Protocol):
    def write(self, frame: NDArray[np.uint8]) -> None: ...


class FrameDisplay(Protocol):
    def show(self, frame: NDArray[np.uint8], mask: NDArray[np.uint8]) -> int: ...


@dataclass
class FrameResult:
    """Output of one pipeline iteration."""
    frame: NDArray[np.uint8]
    mask: NDArray[np.uint8]
    contour: Contour | None
    hand: HandSnapshot
    overlay: bool


class HandPipeline:
    """
    Runs segmentation, contour, hull/defects, hand model and overlay per frame.

    The HandModel is owned by the pipeline and reused across frames. Fingers
    are re-detected every frame; center and radius are only replaced when the
    frame has convexity defects.
    """

    def __init__(
        self,
        vision: VisionPrimitives,
        model: HandModel | None = None,
        show_contour: bool = False,
    ):
        self.vision = vision
        self.model = model if model is not None else HandModel()
        self.show_contour = show_contour
        self.frame_count = 0

    def process(self, frame: NDArray[np.uint8]) -> FrameResult:
        """Process a single frame: detect, update hand model, draw overlay."""
        self.frame_count += 1
        model = self.model
        model.begin_frame()

        mask = self.vision.segment(frame)
        contour = self.vision.largest_contour(mask)
        if contour is not None and len(contour) < MIN_CONTOUR_POINTS:
            logger.debug("Frame %d: ignoring %d-point contour", self.frame_count, len(contour))
            contour = None

        hull = None
        if contour is None:
            logger.debug("Frame %d: no hand contour", self.frame_count)
        else:
            hull = self.vision.convex_hull(contour)

        if hull is not None:
            defects = self.vision.convexity_defects(contour, hull)
            if not model.update_defects(defects):
                logger.debug("Frame %d: no convexity defects, center is stale", self.frame_count)
            model.update_fingers(contour, frame.shape[0])

        hand = model.snapshot()
        overlay = hand.is_complete
        if overlay:
            draw_hand_overlay(frame, hand, contour if self.show_contour else None)

        logger.debug(
            "Frame %d: %d fingers, center=%s radius=%d",
            self.frame_count, hand.num_fingers, hand.center, hand.radius,
        )
        return FrameResult(frame, mask, contour, hand, overlay)

    def run(
        self,
        capture: cv2.VideoCapture,
        display: FrameDisplay | None = None,
        recorder: FrameSink | None = None,
        stop_event: threading.Event | None = None,
        fail_on_end: bool = False,
    ) -> int:
        """
        Process frames until stopped, a quit key is pressed or input ends.

        Args:
            capture: Frame source read with read_frame
            display: Shows the annotated frame and mask, returns key press
            recorder: Receives every annotated frame
            stop_event: Checked once per iteration
            fail_on_end: Treat a missing frame as a fatal capture failure

        Returns:
            Number of processed frames
        """
        if stop_event is None:
            stop_event = threading.Event()

        processed = 0
        logger.info("Hand tracking started")

        while not stop_event.is_set():
            frame = read_frame(capture)
            if frame is None:
                if fail_on_end:
                    raise RuntimeError("Capture stopped delivering frames")
                logger.warning("End of input after %d frames", processed)
                break

            result = self.process(frame)
            processed += 1

            key = display.show(result.frame, result.mask) if display is not None else -1
            if recorder is not None:
                recorder.write(result.frame)

            if key in QUIT_KEYS:
                stop_event.set()

        logger.info("Hand tracking stopped after %d frames", processed)
        return processed
