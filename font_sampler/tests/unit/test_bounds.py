"""Unit tests for character bounds estimation.

Test coverage targets:
- group_strokes: proximity/alignment grouping anchored at one stroke
- split_to_count: equal-width splitting of wide groups
- merge_to_count: closest-pair merging
- compute: the full stroke-to-bounds flow
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from sample_lib.analysis.bounds import BoundsCalculator, compute_character_bounds
from sample_lib.domain import BBox, DrawingPoint, Stroke


def make_line_stroke(start, end, step=5.0):
    """Create a straight stroke with points at most ``step`` apart."""
    x0, y0 = start
    x1, y1 = end
    length = ((x1 - x0) ** 2 + (y1 - y0) ** 2) ** 0.5
    n_pts = max(3, int(length // step) + 1)
    return Stroke([DrawingPoint(x0 + (x1 - x0) * t / (n_pts - 1),
                                y0 + (y1 - y0) * t / (n_pts - 1))
                   for t in range(n_pts)])


class TestGroupStrokes(unittest.TestCase):
    """Tests for BoundsCalculator.group_strokes."""

    def setUp(self):
        self.calc = BoundsCalculator()

    def test_close_aligned_boxes_grouped(self):
        """Boxes with a small gap and shared height form one group."""
        boxes = [BBox(0, 0, 10, 100), BBox(25, 10, 35, 90)]
        self.assertEqual(self.calc.group_strokes(boxes), [[0, 1]])

    def test_far_boxes_separate(self):
        """A gap of 30 or more keeps boxes apart."""
        boxes = [BBox(0, 0, 10, 100), BBox(40, 0, 50, 100)]
        self.assertEqual(self.calc.group_strokes(boxes), [[0], [1]])

    def test_vertically_misaligned_boxes_separate(self):
        """Boxes sharing too little height are not grouped."""
        # Overlap 20 of max height 100 -> ratio 0.2
        boxes = [BBox(0, 0, 10, 100), BBox(15, 80, 25, 180)]
        self.assertEqual(self.calc.group_strokes(boxes), [[0], [1]])

    def test_grouping_is_anchored_not_transitive(self):
        """A stroke near a member but far from the anchor starts its own group."""
        boxes = [BBox(0, 0, 10, 100), BBox(35, 0, 45, 100), BBox(60, 0, 70, 100)]
        self.assertEqual(self.calc.group_strokes(boxes), [[0, 1], [2]])

    def test_flat_boxes_never_grouped(self):
        """Two zero-height boxes have no overlap ratio and stay apart."""
        boxes = [BBox(0, 50, 40, 50), BBox(20, 50, 60, 50)]
        self.assertFalse(self.calc.belongs_with(boxes[0], boxes[1]))
        self.assertEqual(self.calc.group_strokes(boxes), [[0], [1]])

    def test_every_index_grouped_once(self):
        """Each stroke ends up in exactly one group."""
        boxes = [BBox(x, 0, x + 10, 50) for x in (0, 20, 100, 120, 300)]
        groups = self.calc.group_strokes(boxes)
        self.assertEqual(sorted(i for g in groups for i in g), list(range(5)))


class TestSplitToCount(unittest.TestCase):
    """Tests for BoundsCalculator.split_to_count."""

    def setUp(self):
        self.calc = BoundsCalculator()

    def test_wide_box_split_in_two(self):
        """A 150-wide box split for two characters gives two 75-wide boxes."""
        result = self.calc.split_to_count([BBox(100, 0, 250, 50)], 2)
        self.assertEqual(result, [BBox(100, 0, 175, 50), BBox(175, 0, 250, 50)])

    def test_narrow_box_not_split(self):
        """Boxes narrower than 50 are left alone."""
        self.assertEqual(self.calc.split_to_count([BBox(0, 0, 40, 50)], 2), [BBox(0, 0, 40, 50)])

    def test_pieces_limited_by_estimated_width(self):
        """A 100-wide box holds at most round(100 / 30) = 3 characters."""
        result = self.calc.split_to_count([BBox(0, 0, 100, 50)], 4)
        self.assertEqual(len(result), 3)

    def test_half_rounds_up(self):
        """75 / 30 = 2.5 rounds up to 3 pieces."""
        result = self.calc.split_to_count([BBox(0, 0, 75, 50)], 5)
        self.assertEqual(len(result), 3)
        for piece in result:
            self.assertAlmostEqual(piece.width, 25)

    def test_split_in_place_keeps_order(self):
        """Split pieces replace the split box without reordering the rest."""
        narrow = BBox(0, 0, 20, 50)
        wide = BBox(100, 0, 200, 50)
        result = self.calc.split_to_count([narrow, wide], 3)
        self.assertEqual(result, [narrow, BBox(100, 0, 150, 50), BBox(150, 0, 200, 50)])

    def test_widest_split_first(self):
        """Only the widest box is split when one extra box is needed."""
        medium = BBox(0, 0, 60, 50)
        widest = BBox(100, 0, 220, 50)
        result = self.calc.split_to_count([medium, widest], 3)
        self.assertEqual(result[0], medium)
        self.assertEqual(len(result), 3)
        self.assertEqual(result[1].x_min, 100)
        self.assertEqual(result[2].x_max, 220)

    def test_input_not_modified(self):
        """The input list is left as it was."""
        boxes = [BBox(0, 0, 150, 50)]
        self.calc.split_to_count(boxes, 2)
        self.assertEqual(boxes, [BBox(0, 0, 150, 50)])


class TestMergeToCount(unittest.TestCase):
    """Tests for BoundsCalculator.merge_to_count."""

    def setUp(self):
        self.calc = BoundsCalculator()

    def test_closest_pair_merged(self):
        """The two nearest boxes are merged first."""
        boxes = [BBox(0, 0, 10, 10), BBox(20, 0, 30, 10), BBox(100, 0, 110, 10)]
        result = self.calc.merge_to_count(boxes, 2)
        self.assertEqual(result, [BBox(0, 0, 30, 10), BBox(100, 0, 110, 10)])

    def test_intersecting_pair_wins(self):
        """Intersecting boxes have distance zero and merge before others."""
        boxes = [BBox(0, 0, 10, 10), BBox(200, 0, 260, 60), BBox(250, 50, 300, 100)]
        result = self.calc.merge_to_count(boxes, 2)
        self.assertEqual(result, [BBox(0, 0, 10, 10), BBox(200, 0, 300, 100)])

    def test_merge_down_to_one(self):
        """Repeated merging reaches a single enclosing box."""
        boxes = [BBox(x, 0, x + 10, 10) for x in (0, 50, 100, 150)]
        self.assertEqual(self.calc.merge_to_count(boxes, 1), [BBox(0, 0, 160, 10)])


class TestComputeCharacterBounds(unittest.TestCase):
    """Tests for the full compute flow."""

    def test_no_strokes(self):
        """No strokes give no bounds."""
        self.assertEqual(compute_character_bounds([], 3), [])

    def test_nothing_expected(self):
        """Zero expected characters give no bounds."""
        stroke = make_line_stroke((0, 0), (0, 50))
        self.assertEqual(compute_character_bounds([stroke], 0), [])

    def test_separate_strokes_match_count(self):
        """Three separate strokes for three characters give three boxes."""
        strokes = [make_line_stroke((x, 100), (x, 160)) for x in (50, 150, 250)]
        bounds = compute_character_bounds(strokes, 3)
        self.assertEqual(len(bounds), 3)
        self.assertEqual(sorted(b.x_min for b in bounds), [50, 150, 250])

    def test_wide_stroke_forced_split(self):
        """One 150x50 stroke for two characters splits into two 75-wide boxes."""
        stroke = Stroke(make_line_stroke((100, 100), (250, 100)).points +
                        make_line_stroke((250, 105), (250, 150)).points)
        bounds = compute_character_bounds([stroke], 2)
        self.assertEqual(len(bounds), 2)
        for box in bounds:
            self.assertAlmostEqual(box.width, 75)
            self.assertEqual((box.y_min, box.y_max), (100, 150))

    def test_extra_strokes_merged(self):
        """Four strokes for two characters merge down to two boxes."""
        strokes = [make_line_stroke((x, 100), (x, 160)) for x in (0, 100, 120 + 300, 440 + 300)]
        bounds = compute_character_bounds(strokes, 2)
        self.assertEqual(len(bounds), 2)

    def test_letter_with_dot_grouped(self):
        """A stem and a nearby dot-like stroke above it stay one group."""
        stem = make_line_stroke((100, 100), (100, 160))
        cap = make_line_stroke((95, 95), (110, 120))
        bounds = compute_character_bounds([stem, cap], 1)
        self.assertEqual(len(bounds), 1)
        self.assertEqual(bounds[0], BBox(95, 95, 110, 160))


if __name__ == '__main__':
    unittest.main()
