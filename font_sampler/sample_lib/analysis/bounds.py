"""Character bounds estimation from strokes.

This module turns strokes into one bounding box per expected character.
Strokes that sit close together horizontally and share most of their
vertical extent are grouped into a single character region. The group
count is then adjusted to the expected character count: wide groups are
cut into equal-width slices when there are too few, and the closest
groups are merged when there are too many.

Grouping is a single greedy pass. Each ungrouped stroke becomes an anchor
and collects every other ungrouped stroke that is close to the anchor
itself, so membership is not transitive: two strokes that are each near
a third but not near the anchor end up in different groups.

Example usage::

    from sample_lib.analysis.bounds import BoundsCalculator
    from sample_lib.analysis.strokes import segment_strokes

    strokes = segment_strokes(drawing.points)
    boxes = BoundsCalculator().compute(strokes, expected_count=3)
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from .. import config
from ..domain.geometry import BBox, Stroke

logger = logging.getLogger(__name__)


class BoundsCalculator:
    """Estimates per-character bounding boxes from strokes.

    Attributes:
        max_horizontal_gap: Strokes join a group only when their
            horizontal gap is below this.
        min_vertical_overlap: Strokes join a group only when their shared
            height exceeds this fraction of the taller stroke.
        split_min_width: Groups narrower than this are never split.
        char_width: Estimated width of one character, used to decide how
            many slices a wide group holds.
    """

    def __init__(self,
                 max_horizontal_gap: float = config.GROUP_MAX_HORIZONTAL_GAP,
                 min_vertical_overlap: float = config.GROUP_MIN_VERTICAL_OVERLAP,
                 split_min_width: float = config.SPLIT_MIN_WIDTH,
                 char_width: float = config.ESTIMATED_CHAR_WIDTH):
        self.max_horizontal_gap = max_horizontal_gap
        self.min_vertical_overlap = min_vertical_overlap
        self.split_min_width = split_min_width
        self.char_width = char_width

    def compute(self, strokes: Sequence[Stroke], expected_count: int) -> List[BBox]:
        """Compute character bounds for a set of strokes.

        Args:
            strokes: Strokes in drawing order.
            expected_count: Number of characters the drawing should hold.

        Returns:
            Bounding boxes in no particular horizontal order. Empty when
            there are no strokes or nothing is expected.
        """
        if not strokes or expected_count < 1:
            return []

        stroke_boxes = [s.bbox for s in strokes]
        groups = self.group_strokes(stroke_boxes)
        group_boxes = [
            BBox.from_points(p for idx in group for p in strokes[idx])
            for group in groups
        ]
        logger.debug("Grouped %d strokes into %d groups (expected %d)",
                     len(strokes), len(group_boxes), expected_count)

        if len(group_boxes) < expected_count:
            return self.split_to_count(group_boxes, expected_count)
        if len(group_boxes) > expected_count:
            return self.merge_to_count(group_boxes, expected_count)
        return group_boxes

    def belongs_with(self, anchor: BBox, other: BBox) -> bool:
        """Check whether ``other`` should join the group anchored at ``anchor``."""
        max_height = max(anchor.height, other.height)
        if max_height > 0:
            overlap_ratio = anchor.vertical_overlap(other) / max_height
        else:
            overlap_ratio = 0.0
        return (anchor.horizontal_distance(other) < self.max_horizontal_gap and
                overlap_ratio > self.min_vertical_overlap)

    def group_strokes(self, boxes: Sequence[BBox]) -> List[List[int]]:
        """Group stroke boxes by proximity to an anchor stroke.

        Args:
            boxes: One bounding box per stroke.

        Returns:
            Groups of stroke indices. Every index appears in exactly one
            group; groups are ordered by their anchor index.
        """
        visited = [False] * len(boxes)
        groups = []

        for i, anchor in enumerate(boxes):
            if visited[i]:
                continue
            group = [i]
            visited[i] = True

            for j, other in enumerate(boxes):
                if visited[j]:
                    continue
                if self.belongs_with(anchor, other):
                    group.append(j)
                    visited[j] = True

            groups.append(group)

        return groups

    def split_to_count(self, boxes: Sequence[BBox], expected_count: int) -> List[BBox]:
        """Split the widest boxes until ``expected_count`` boxes exist.

        Boxes are visited once each, widest first. A box is cut into equal
        slices, as many as its width suggests but never more than needed.
        Stops early when no visited box can be split further.

        Args:
            boxes: Group boxes.
            expected_count: Target number of boxes.

        Returns:
            New list where each split box is replaced in place by its
            slices, left to right.
        """
        remaining = expected_count - len(boxes)
        by_width = sorted(range(len(boxes)), key=lambda idx: -boxes[idx].width)
        replacements = {}

        for idx in by_width:
            if remaining <= 0:
                break
            width = boxes[idx].width
            if width < self.split_min_width:
                continue

            pieces = min(remaining + 1, _round_half_up(width / self.char_width))
            if pieces <= 1:
                continue

            replacements[idx] = boxes[idx].split_horizontally(pieces)
            remaining -= pieces - 1
            logger.debug("Split box %d (width %.1f) into %d pieces", idx, width, pieces)

        result = []
        for idx, box in enumerate(boxes):
            result.extend(replacements.get(idx, [box]))
        return result

    def merge_to_count(self, boxes: Sequence[BBox], expected_count: int) -> List[BBox]:
        """Merge the closest pair of boxes until ``expected_count`` remain.

        Args:
            boxes: Group boxes.
            expected_count: Target number of boxes, at least 1.

        Returns:
            New list of boxes; each merged box takes the position of the
            lower-indexed box of its pair.
        """
        result = list(boxes)
        while len(result) > max(expected_count, 1):
            best = math.inf
            first, second = 0, 1
            for i in range(len(result) - 1):
                for j in range(i + 1, len(result)):
                    distance = result[i].distance_to(result[j])
                    if distance < best:
                        best = distance
                        first, second = i, j

            merged = result[first].union(result[second])
            result = result[:first] + [merged] + result[first + 1:second] + result[second + 1:]
        return result


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_character_bounds(strokes: Sequence[Stroke], expected_count: int) -> List[BBox]:
    """Compute character bounds using the default thresholds."""
    return BoundsCalculator().compute(strokes, expected_count)
