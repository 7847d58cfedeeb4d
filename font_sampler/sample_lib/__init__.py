"""Handwriting Sample Package.

Turns a freehand drawing of a written sentence into one normalized sample
per character, ready to be stored with a font and handed to a font
compiler.

The package is organized into the following modules:
    domain: Value objects (DrawingPoint, DrawingData, BBox, Stroke) and
        errors.
    analysis: The extraction stages: stroke segmentation, character bounds,
        matching, isolation/normalization and the slicing fallback.
    api: ExtractionService and sample-map helpers for callers.
    utils: JSON encoding and Pillow preview rendering.
    config: Extraction thresholds.

Example usage:
    Extract samples from a drawing::

        from sample_lib import DrawingData, DrawingPoint, extract_characters_from_drawing

        drawing = DrawingData([DrawingPoint(x, y) for x, y in coords], 800, 300)
        samples = extract_characters_from_drawing(drawing, "abc")

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import BoundsCalculator, CharacterIsolator, StrokeSegmenter
from .api import ExtractionService, extract_characters_from_drawing, merge_samples
from .domain import BBox, DrawingData, DrawingPoint, SampleError, SampleFormatError, Stroke

__all__ = [
    # Domain objects
    'DrawingPoint', 'DrawingData', 'BBox', 'Stroke',
    'SampleError', 'SampleFormatError',
    # Analysis
    'StrokeSegmenter', 'BoundsCalculator', 'CharacterIsolator',
    # Services
    'ExtractionService', 'extract_characters_from_drawing', 'merge_samples',
]

__version__ = '1.0.0'
