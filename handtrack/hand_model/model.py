"""Per-frame hand model backed by fixed-capacity buffers."""

from dataclasses import dataclass
from typing import Sequence

from .config import MAX_DEFECTS, MAX_FINGERS, NUM_FINGERS
from .defects import ConvexityDefect, aggregate_defects
from .fingertips import detect_fingertips
from .geometry import ORIGIN, Point


@dataclass(frozen=True)
class HandSnapshot:
    """Counted hand model state at the end of a frame."""
    center: Point
    radius: int
    fingers: tuple[Point, ...]
    defect_points: tuple[Point, ...]
    fresh: bool

    @property
    def num_fingers(self) -> int:
        return len(self.fingers)

    @property
    def is_complete(self) -> bool:
        """True when exactly one finger per digit was found."""
        return len(self.fingers) == NUM_FINGERS


class HandModel:
    """
    Hand center, radius, fingertips and defect points for the current frame.

    Finger and defect slots are allocated once and overwritten in place, so
    slots past ``num_fingers`` / ``num_defects`` may hold values from earlier
    frames. The ``fingers`` and ``defect_points`` properties only return the
    counted prefix.

    Center and radius change only in frames with at least one defect. In other
    frames they keep their last value and ``fresh`` is False.
    """

    def __init__(self, max_fingers: int = MAX_FINGERS, max_defects: int = MAX_DEFECTS):
        if max_fingers < 0 or max_defects < 0:
            raise ValueError("buffer capacities must be >= 0")
        self.center: Point = ORIGIN
        self.radius: int = 0
        self.fresh = False
        self.num_fingers = 0
        self.num_defects = 0
        self._fingers: list[Point] = [ORIGIN] * max_fingers
        self._defects: list[Point] = [ORIGIN] * max_defects

    @property
    def max_fingers(self) -> int:
        return len(self._fingers)

    @property
    def max_defects(self) -> int:
        return len(self._defects)

    @property
    def fingers(self) -> tuple[Point, ...]:
        return tuple(self._fingers[:self.num_fingers])

    @property
    def defect_points(self) -> tuple[Point, ...]:
        return tuple(self._defects[:self.num_defects])

    @property
    def is_complete(self) -> bool:
        return self.num_fingers == NUM_FINGERS

    def begin_frame(self) -> None:
        """Invalidate per-frame results without clearing the buffers."""
        self.num_fingers = 0
        self.fresh = False

    def update_defects(self, defects: Sequence[ConvexityDefect]) -> bool:
        """
        Update center, radius and defect points from this frame's defects.

        Returns:
            False when there were no defects and nothing was updated
        """
        summary = aggregate_defects(defects, max_defects=self.max_defects)
        if summary is None:
            return False

        for i, point in enumerate(summary.defect_points):
            self._defects[i] = point
        self.num_defects = len(summary.defect_points)
        self.center = summary.center
        self.radius = summary.radius
        self.fresh = True
        return True

    def update_fingers(self, contour: Sequence[Point], frame_height: int) -> int:
        """Detect fingertips around the current center and store them."""
        found = detect_fingertips(
            contour, self.center, frame_height, max_fingers=self.max_fingers
        )
        for i, point in enumerate(found):
            self._fingers[i] = point
        self.num_fingers = len(found)
        return self.num_fingers

    def snapshot(self) -> HandSnapshot:
        return HandSnapshot(
            center=self.center,
            radius=self.radius,
            fingers=self.fingers,
            defect_points=self.defect_points,
            fresh=self.fresh,
        )
