"""
Tests for the convexity defect aggregator

Run with: python -m pytest handtrack/hand_model/test_defects.py -v
"""

import unittest

from handtrack.hand_model.config import MAX_DEFECTS
from handtrack.hand_model.defects import ConvexityDefect, DefectSummary, aggregate_defects


def make_defects(points):
    return [ConvexityDefect(depth_point=p, depth=1.0) for p in points]


class TestAggregateDefects(unittest.TestCase):

    def test_square_of_depth_points(self):
        """Center is the mean, radius the mean truncated distance."""
        summary = aggregate_defects(make_defects([(0, 0), (10, 0), (0, 10), (10, 10)]))

        self.assertIsInstance(summary, DefectSummary)
        self.assertEqual(summary.center, (5, 5))
        # Each distance is sqrt(50) = 7.07, truncated to 7
        self.assertEqual(summary.radius, 7)
        self.assertEqual(summary.total, 4)
        self.assertEqual(summary.defect_points, ((0, 0), (10, 0), (0, 10), (10, 10)))

    def test_empty_is_none(self):
        self.assertIsNone(aggregate_defects([]))

    def test_single_defect(self):
        summary = aggregate_defects(make_defects([(42, 17)]))
        self.assertEqual(summary.center, (42, 17))
        self.assertEqual(summary.radius, 0)

    def test_center_uses_all_defects_beyond_cap(self):
        """Only MAX_DEFECTS points are kept, but every defect counts for the center."""
        points = [(i * 10, 0) for i in range(10)]
        summary = aggregate_defects(make_defects(points))

        # Mean of 0..90 is 45; the first 8 alone would give 35
        self.assertEqual(summary.center, (45, 0))
        self.assertEqual(summary.total, 10)
        self.assertEqual(len(summary.defect_points), MAX_DEFECTS)
        self.assertEqual(summary.defect_points, tuple(points[:MAX_DEFECTS]))

    def test_radius_uses_all_defects_beyond_cap(self):
        points = [(0, 0)] * 8 + [(100, 0), (100, 0)]
        summary = aggregate_defects(make_defects(points))

        # Center x = 200 // 10 = 20; distances 20 (x8) and 80 (x2)
        self.assertEqual(summary.center, (20, 0))
        self.assertEqual(summary.radius, (8 * 20 + 2 * 80) // 10)

    def test_custom_cap(self):
        summary = aggregate_defects(make_defects([(0, 0), (2, 0), (4, 0)]), max_defects=1)
        self.assertEqual(summary.defect_points, ((0, 0),))
        self.assertEqual(summary.center, (2, 0))

    def test_negative_cap(self):
        with self.assertRaises(ValueError):
            aggregate_defects(make_defects([(0, 0)]), max_defects=-1)

    def test_center_truncates_toward_zero(self):
        summary = aggregate_defects(make_defects([(-1, -3), (0, 0)]))
        self.assertEqual(summary.center, (0, -1))

    def test_depth_is_ignored(self):
        shallow = [ConvexityDefect((0, 0), 0.5), ConvexityDefect((8, 6), 0.5)]
        deep = [ConvexityDefect((0, 0), 90.0), ConvexityDefect((8, 6), 10.0)]
        self.assertEqual(aggregate_defects(shallow), aggregate_defects(deep))

    def test_repeatable(self):
        defects = make_defects([(3, 9), (14, 2), (27, 31), (5, 5)])
        self.assertEqual(aggregate_defects(defects), aggregate_defects(defects))


if __name__ == "__main__":
    unittest.main()
