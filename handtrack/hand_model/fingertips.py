"""Fingertip detection as local maxima of distance to the hand center."""

from typing import Sequence

from .config import BOTTOM_MARGIN_PX, MAX_FINGERS
from .geometry import ORIGIN, Point, squared_distance


def detect_fingertips(
    contour: Sequence[Point],
    center: Point,
    frame_height: int,
    max_fingers: int = MAX_FINGERS,
    bottom_margin: int = BOTTOM_MARGIN_PX,
) -> list[Point]:
    """
    Scan the contour once, in order, for local maxima of squared distance to center.

    A point is a fingertip when its distance is strictly greater than both the
    previous and the next sample. The scan is linear, not circular: the last
    contour point is never reported and the first one is compared against a
    zero distance in place of a predecessor. Candidates at the origin
    or within ``bottom_margin`` pixels of the frame bottom are dropped, since
    the arm enters the frame from below.

    Args:
        contour: Ordered contour points
        center: Hand center
        frame_height: Frame height in pixels
        max_fingers: Scan stops once this many fingertips are found

    Returns:
        Fingertips in contour order
    """
    fingers: list[Point] = []
    if max_fingers <= 0:
        return fingers

    dist_prev = dist_prev2 = 0
    candidate: Point = ORIGIN

    for point in contour:
        dist_now = squared_distance(center, point)

        if (dist_now < dist_prev and dist_prev > dist_prev2
                and candidate != ORIGIN
                and candidate[1] < frame_height - bottom_margin):
            fingers.append(candidate)
            if len(fingers) >= max_fingers:
                break

        dist_prev2 = dist_prev
        dist_prev = dist_now
        candidate = (point[0], point[1])

    return fingers
