"""Hand center and radius from convexity defects."""

from dataclasses import dataclass
from typing import Sequence

from .config import MAX_DEFECTS
from .geometry import Point, mean_point, squared_distance, truncating_div, truncating_sqrt


@dataclass(frozen=True)
class ConvexityDefect:
    """Deepest contour point between two consecutive hull vertices."""
    depth_point: Point
    depth: float = 0.0


@dataclass(frozen=True)
class DefectSummary:
    """Aggregated defect geometry for one frame."""
    center: Point
    radius: int
    defect_points: tuple[Point, ...]
    total: int


def aggregate_defects(
    defects: Sequence[ConvexityDefect], max_defects: int = MAX_DEFECTS
) -> DefectSummary | None:
    """
    Compute hand center and radius from convexity defect depth points.

    The center is the truncating mean of every depth point and the radius is
    the truncating mean of the truncated distances from that center. Only the
    first ``max_defects`` depth points are kept in ``defect_points``.

    Returns:
        DefectSummary, or None when there are no defects. None means the
        caller keeps its previous center and radius.
    """
    if max_defects < 0:
        raise ValueError(f"max_defects must be >= 0, got {max_defects}")
    if not defects:
        return None

    depth_points = [d.depth_point for d in defects]
    center = mean_point(depth_points)
    total = len(depth_points)

    dist = sum(truncating_sqrt(squared_distance(center, p)) for p in depth_points)
    radius = truncating_div(dist, total)

    return DefectSummary(
        center=center,
        radius=radius,
        defect_points=tuple(depth_points[:max_defects]),
        total=total,
    )
