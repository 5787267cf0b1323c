"""Integer point geometry used by the hand model."""

import math
from typing import Sequence

Point = tuple[int, int]

ORIGIN: Point = (0, 0)


def squared_distance(a: Point, b: Point) -> int:
    """Squared Euclidean distance between 2D points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def truncating_sqrt(d: int) -> int:
    """Square root truncated toward zero."""
    return math.isqrt(d)


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ValueError("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def mean_point(points: Sequence[Point]) -> Point:
    """Average of 2D points with truncating division."""
    if not points:
        raise ValueError("mean of an empty point sequence")
    n = len(points)
    x = sum(p[0] for p in points)
    y = sum(p[1] for p in points)
    return truncating_div(x, n), truncating_div(y, n)
