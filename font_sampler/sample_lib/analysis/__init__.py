"""Handwriting segmentation analysis module.

This module holds the stages of character extraction, each usable on its
own:

    StrokeSegmenter: Splits points into strokes at pen lifts.
    BoundsCalculator: Groups strokes into character boxes and adjusts the
        box count to the expected character count.
    extract_by_bounds / match_to_expected: Collect points per box and pair
        boxes with characters left to right.
    CharacterIsolator: Removes connecting strokes and normalizes samples.
    fallback_extraction: Equal-width slicing used when the stages above fail.

Example usage::

    from sample_lib.analysis import BoundsCalculator, StrokeSegmenter

    strokes = StrokeSegmenter().segment(drawing.points)
    boxes = BoundsCalculator().compute(strokes, expected_count=3)
"""

from .bounds import BoundsCalculator, compute_character_bounds
from .fallback import fallback_extraction, slice_horizontally
from .isolation import (
    CharacterIsolator,
    isolate_and_normalize,
    isolate_character_points,
    normalize_drawing,
)
from .matching import extract_by_bounds, match_to_expected
from .strokes import StrokeSegmenter, segment_strokes

__all__ = [
    'StrokeSegmenter', 'segment_strokes',
    'BoundsCalculator', 'compute_character_bounds',
    'extract_by_bounds', 'match_to_expected',
    'CharacterIsolator', 'isolate_character_points', 'normalize_drawing',
    'isolate_and_normalize',
    'fallback_extraction', 'slice_horizontally',
]
