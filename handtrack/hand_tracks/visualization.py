"""Overlay drawing and display windows for the hand tracker."""

import cv2
import numpy as np
from numpy.typing import NDArray

from ..hand_model import HandSnapshot, Point
from ..hand_model.config import (
    CENTER_MARKER_RADIUS,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_GREY,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_YELLOW,
    DEFECT_MARKER_RADIUS,
    DEFECT_MARKER_THICKNESS,
    FINGER_MARKER_RADIUS,
    FINGER_MARKER_THICKNESS,
    OUTPUT_WINDOW,
    OUTPUT_WINDOW_POS,
    THRESHOLD_WINDOW,
    THRESHOLD_WINDOW_POS,
)


def draw_contour(frame: NDArray[np.uint8], contour: list[Point]) -> None:
    """Draw the hand contour as a closed polyline."""
    pts = np.array(contour, dtype=np.int32).reshape(-1, 1, 2)
    cv2.polylines(frame, [pts], True, COLOR_BLUE, 1, cv2.LINE_AA)


def draw_hand_overlay(
    frame: NDArray[np.uint8],
    hand: HandSnapshot,
    contour: list[Point] | None = None,
) -> None:
    """Draw center, radius, fingertips and defect points of a detected hand."""
    if contour:
        draw_contour(frame, contour)

    cv2.circle(frame, hand.center, CENTER_MARKER_RADIUS, COLOR_PURPLE, 1, cv2.LINE_AA)
    cv2.circle(frame, hand.center, max(hand.radius, 0), COLOR_RED, 1, cv2.LINE_AA)

    for finger in hand.fingers:
        cv2.circle(
            frame, finger, FINGER_MARKER_RADIUS, COLOR_GREEN,
            FINGER_MARKER_THICKNESS, cv2.LINE_AA,
        )
        cv2.line(frame, hand.center, finger, COLOR_YELLOW, 1, cv2.LINE_AA)

    for point in hand.defect_points:
        cv2.circle(
            frame, point, DEFECT_MARKER_RADIUS, COLOR_GREY,
            DEFECT_MARKER_THICKNESS, cv2.LINE_AA,
        )


class TrackerDisplay:
    """Manages the output and thresholded OpenCV windows."""

    def __init__(
        self,
        output_window: str = OUTPUT_WINDOW,
        threshold_window: str = THRESHOLD_WINDOW,
    ):
        self.output_window = output_window
        self.threshold_window = threshold_window
        cv2.namedWindow(output_window, cv2.WINDOW_AUTOSIZE)
        cv2.namedWindow(threshold_window, cv2.WINDOW_AUTOSIZE)
        cv2.moveWindow(output_window, *OUTPUT_WINDOW_POS)
        cv2.moveWindow(threshold_window, *THRESHOLD_WINDOW_POS)

    def show(self, frame: NDArray[np.uint8], mask: NDArray[np.uint8]) -> int:
        """Display frame and mask and return key press."""
        cv2.imshow(self.output_window, frame)
        cv2.imshow(self.threshold_window, mask)
        return cv2.waitKey(1) & 0xFF

    def close(self) -> None:
        """Close display windows."""
        cv2.destroyWindow(self.output_window)
        cv2.destroyWindow(self.threshold_window)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
