"""Vision primitives: skin segmentation, contour, convex hull and defects."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import cv2
import numpy as np
from numpy.typing import NDArray

from ..hand_model import ConvexityDefect, Point
from ..hand_model.config import (
    CONTOUR_APPROX_EPSILON,
    MASK_BLUR_KERNEL,
    MEDIAN_KERNEL,
    MIN_CONTOUR_POINTS,
    MORPH_KERNEL_SIZE,
    SKIN_HSV_LOWER,
    SKIN_HSV_UPPER,
    SMOOTH_KERNEL,
)

logger = logging.getLogger(__name__)

Contour = list[Point]

# OpenCV reports defect depth as fixed point with 8 fractional bits
_DEPTH_SCALE = 256.0


class VisionPrimitives(Protocol):
    """Image operations the hand pipeline delegates to a vision library."""

    def segment(self, frame: NDArray[np.uint8]) -> NDArray[np.uint8]:
        """Binary skin mask of a BGR frame."""
        ...

    def largest_contour(self, mask: NDArray[np.uint8]) -> Contour | None:
        """Simplified largest-area external contour of the mask."""
        ...

    def convex_hull(self, contour: Contour) -> Any | None:
        """Convex hull of the contour, in whatever form convexity_defects takes."""
        ...

    def convexity_defects(self, contour: Contour, hull: Any) -> list[ConvexityDefect]:
        """Convexity defects of the contour relative to its hull."""
        ...


@dataclass
class SkinThreshold:
    """Inclusive HSV bounds of skin color (OpenCV hue range 0-179)."""
    lower: tuple[int, int, int] = SKIN_HSV_LOWER
    upper: tuple[int, int, int] = SKIN_HSV_UPPER


def _as_cv_contour(contour: Contour) -> NDArray[np.int32]:
    return np.array(contour, dtype=np.int32).reshape(-1, 1, 2)


class OpenCVVision:
    """VisionPrimitives implemented with OpenCV."""

    def __init__(
        self,
        threshold: SkinThreshold | None = None,
        approx_epsilon: float = CONTOUR_APPROX_EPSILON,
    ):
        self.threshold = threshold or SkinThreshold()
        self.approx_epsilon = approx_epsilon
        self._kernel = cv2.getStructuringElement(
            cv2.MORPH_RECT, (MORPH_KERNEL_SIZE, MORPH_KERNEL_SIZE)
        )

    def segment(self, frame: NDArray[np.uint8]) -> NDArray[np.uint8]:
        # Soften image, then remove impulsive noise
        smoothed = cv2.GaussianBlur(frame, (SMOOTH_KERNEL, SMOOTH_KERNEL), 0)
        smoothed = cv2.medianBlur(smoothed, MEDIAN_KERNEL)

        hsv = cv2.cvtColor(smoothed, cv2.COLOR_BGR2HSV)
        mask = cv2.inRange(
            hsv,
            np.array(self.threshold.lower, dtype=np.uint8),
            np.array(self.threshold.upper, dtype=np.uint8),
        )

        mask = cv2.morphologyEx(mask, cv2.MORPH_OPEN, self._kernel)
        return cv2.GaussianBlur(mask, (MASK_BLUR_KERNEL, MASK_BLUR_KERNEL), 0)

    def largest_contour(self, mask: NDArray[np.uint8]) -> Contour | None:
        contours = cv2.findContours(
            mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE
        )[-2]

        best = None
        max_area = 0.0
        for contour in contours:
            area = abs(cv2.contourArea(contour))
            if area > max_area:
                max_area = area
                best = contour

        if best is None:
            return None

        approx = cv2.approxPolyDP(best, self.approx_epsilon, True)
        return [(int(x), int(y)) for x, y in approx.reshape(-1, 2)]

    def convex_hull(self, contour: Contour) -> NDArray[np.int32] | None:
        if len(contour) < MIN_CONTOUR_POINTS:
            return None
        hull = cv2.convexHull(_as_cv_contour(contour), returnPoints=False)
        if hull is None or len(hull) < MIN_CONTOUR_POINTS:
            return None
        return hull

    def convexity_defects(
        self, contour: Contour, hull: NDArray[np.int32]
    ) -> list[ConvexityDefect]:
        try:
            raw = cv2.convexityDefects(_as_cv_contour(contour), hull)
        except cv2.error as e:
            # Raised for self-intersecting contours with non-monotonic hulls
            logger.debug("Convexity defects unavailable: %s", e)
            return []

        if raw is None:
            return []

        return [
            ConvexityDefect(depth_point=contour[int(far)], depth=float(depth) / _DEPTH_SCALE)
            for _, _, far, depth in raw.reshape(-1, 4)
        ]
