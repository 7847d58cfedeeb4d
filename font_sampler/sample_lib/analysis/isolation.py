"""Character isolation and normalization.

A character cut out of cursive or sloppy handwriting usually carries the
tail of the line that joined it to its neighbour. Isolation re-segments the
character's points and drops strokes that look like such connectors: much
wider than tall and low overall.

Normalization then centers what is left on the canvas and scales it
uniformly so it fits in a fixed fraction of the canvas, giving every
sample the same frame regardless of how large it was written.

Example usage::

    from sample_lib.analysis.isolation import CharacterIsolator

    isolator = CharacterIsolator()
    sample = isolator.isolate_and_normalize(points, 400, 400)
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .. import config
from ..domain.geometry import BBox, DrawingData, DrawingPoint
from .strokes import StrokeSegmenter


class CharacterIsolator:
    """Removes connecting strokes and normalizes character samples.

    Attributes:
        segmenter: StrokeSegmenter used to re-split character points.
        connector_aspect: Width-to-height ratio above which a low stroke
            is a connector.
        connector_max_height: Only strokes lower than this can be
            connectors.
        fill: Fraction of the canvas a normalized sample fills.
    """

    def __init__(self, segmenter: StrokeSegmenter | None = None,
                 connector_aspect: float = config.CONNECTOR_ASPECT,
                 connector_max_height: float = config.CONNECTOR_MAX_HEIGHT,
                 fill: float = config.NORMALIZE_FILL):
        self.segmenter = segmenter or StrokeSegmenter()
        self.connector_aspect = connector_aspect
        self.connector_max_height = connector_max_height
        self.fill = fill

    def is_connector(self, box: BBox) -> bool:
        """Check whether a stroke box looks like a line joining two letters."""
        return (box.width > box.height * self.connector_aspect and
                box.height < self.connector_max_height)

    def isolate(self, points: Sequence[DrawingPoint]) -> List[DrawingPoint]:
        """Drop connecting strokes from a character's points.

        Args:
            points: Character points in drawing order.

        Returns:
            Points of the surviving strokes in drawing order. When the
            points form at most one stroke they are returned unchanged.
        """
        if not points:
            return []

        strokes = self.segmenter.segment(points)
        if len(strokes) <= 1:
            return list(points)

        return [p for stroke in strokes if not self.is_connector(stroke.bbox)
                for p in stroke]

    def normalize(self, drawing: DrawingData) -> DrawingData:
        """Center and scale a drawing to fill its canvas.

        The bounding box center moves to the canvas center and the points
        are scaled uniformly so the box fits within ``fill`` of the canvas
        on both axes. A zero-sized axis does not constrain the scale.

        Args:
            drawing: Drawing to normalize.

        Returns:
            New DrawingData on the same canvas. Pressure values are kept.
            An empty drawing is returned as is.
        """
        if drawing.is_empty:
            return drawing

        coords = np.array([p.to_tuple() for p in drawing.points], dtype=float)
        mins = coords.min(axis=0)
        maxs = coords.max(axis=0)
        size = maxs - mins
        center = mins + size / 2
        target = np.array([drawing.width, drawing.height], dtype=float)

        scale_x = self.fill * target[0] / size[0] if size[0] > 0 else 1.0
        scale_y = self.fill * target[1] / size[1] if size[1] > 0 else 1.0
        scale = min(scale_x, scale_y)

        normalized = (coords - center) * scale + target / 2
        return drawing.with_points(
            DrawingPoint(float(x), float(y), p.pressure)
            for (x, y), p in zip(normalized, drawing.points)
        )

    def isolate_and_normalize(self, points: Sequence[DrawingPoint],
                              width: int, height: int) -> DrawingData:
        """Isolate a character and normalize it onto a ``width`` x ``height`` canvas."""
        return self.normalize(DrawingData(self.isolate(points), width, height))


def isolate_character_points(points: Sequence[DrawingPoint]) -> List[DrawingPoint]:
    """Drop connecting strokes using the default thresholds."""
    return CharacterIsolator().isolate(points)


def normalize_drawing(drawing: DrawingData) -> DrawingData:
    """Normalize a drawing using the default fill fraction."""
    return CharacterIsolator().normalize(drawing)


def isolate_and_normalize(points: Sequence[DrawingPoint], width: int, height: int) -> DrawingData:
    """Isolate and normalize using the default thresholds."""
    return CharacterIsolator().isolate_and_normalize(points, width, height)
