"""Domain objects for handwriting samples.

This module provides the value objects shared by every stage of the
extraction pipeline.

Geometry classes:
    DrawingPoint: Immutable pen position with optional pressure.
    DrawingData: A capture (points plus canvas width/height).
    BBox: Immutable bounding box with split/merge helpers.
    Stroke: Sequence of points from one pen-down gesture.

Errors:
    SampleError: Base class for sample errors.
    SampleFormatError: Unparseable drawing or point payload.

Example usage::

    from sample_lib.domain import DrawingPoint, DrawingData, BBox

    drawing = DrawingData([DrawingPoint(10, 10), DrawingPoint(12, 14)], 400, 400)
    box = BBox.from_points(drawing.points)
    left, right = box.split_horizontally(2)
"""

from .errors import SampleError, SampleFormatError
from .geometry import BBox, DrawingData, DrawingPoint, Stroke

__all__ = [
    'DrawingPoint', 'DrawingData', 'BBox', 'Stroke',
    'SampleError', 'SampleFormatError',
]
