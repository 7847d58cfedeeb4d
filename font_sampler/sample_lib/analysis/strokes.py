"""Pen-lift stroke segmentation.

Drawing surfaces report one flat list of points per capture. This module
recovers the individual pen-down gestures from that list by looking for
jumps between consecutive points: a jump longer than the pen-lift distance
means the pen left the surface.

Example usage::

    from sample_lib.analysis.strokes import StrokeSegmenter

    segmenter = StrokeSegmenter()
    strokes = segmenter.segment(drawing.points)
    boxes = [s.bbox for s in strokes]
"""

from __future__ import annotations

from typing import List, Sequence

from .. import config
from ..domain.geometry import DrawingPoint, Stroke


class StrokeSegmenter:
    """Splits a point sequence into strokes at pen lifts.

    Attributes:
        pen_lift_distance: Consecutive points further apart than this are
            treated as belonging to different strokes.
        min_points: Strokes with fewer points are discarded as noise.
    """

    def __init__(self, pen_lift_distance: float = config.PEN_LIFT_DISTANCE,
                 min_points: int = config.MIN_STROKE_POINTS):
        self.pen_lift_distance = pen_lift_distance
        self.min_points = min_points

    def split(self, points: Sequence[DrawingPoint]) -> List[List[DrawingPoint]]:
        """Split at every pen lift without discarding anything.

        Args:
            points: Points in drawing order.

        Returns:
            Runs of consecutive points; every input point appears in
            exactly one run.
        """
        if not points:
            return []

        runs = []
        current = [points[0]]
        for prev, curr in zip(points, points[1:]):
            if curr.distance_to(prev) > self.pen_lift_distance:
                runs.append(current)
                current = []
            current.append(curr)
        runs.append(current)
        return runs

    def segment(self, points: Sequence[DrawingPoint]) -> List[Stroke]:
        """Find the strokes in a point sequence.

        Args:
            points: Points in drawing order.

        Returns:
            Strokes in drawing order. Runs shorter than ``min_points``
            are dropped, so a single point yields no strokes.
        """
        return [Stroke(run) for run in self.split(points)
                if len(run) >= self.min_points]


def segment_strokes(points: Sequence[DrawingPoint]) -> List[Stroke]:
    """Segment points into strokes using the default thresholds."""
    return StrokeSegmenter().segment(points)
