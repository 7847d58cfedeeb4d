"""Utility functions for handwriting samples.

This module provides JSON encoding of samples and preview rendering. These
utilities are used by the web layer and are also exported for use by
external code.

Serialization utilities:
    points_to_json / points_from_json: Stored point array format.
    samples_to_dict / samples_from_dict: Whole sample maps.

Rendering utilities:
    render_sample / render_sample_png: Draw one sample.
    render_text_preview: Lay out text with a sample map.

Example usage::

    from sample_lib.utils import points_from_json, render_sample_png

    points = points_from_json(row['points'])
    png = render_sample_png(DrawingData(points, 400, 400), size=128)
"""

from .rendering import render_sample, render_sample_png, render_text_preview
from .serialization import (
    points_from_json,
    points_to_json,
    samples_from_dict,
    samples_to_dict,
)

__all__ = [
    'points_to_json', 'points_from_json', 'samples_to_dict', 'samples_from_dict',
    'render_sample', 'render_sample_png', 'render_text_preview',
]
