"""Equal-width slicing used when stroke analysis fails.

The slicer ignores strokes entirely: the horizontal extent of the drawing
is cut into one vertical band per expected character and every point goes
to the band containing its x coordinate.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from ..domain.geometry import DrawingData, DrawingPoint
from .isolation import CharacterIsolator


def slice_horizontally(points: Sequence[DrawingPoint], count: int) -> List[List[DrawingPoint]]:
    """Assign points to ``count`` equal-width vertical bands.

    Args:
        points: Points in drawing order.
        count: Number of bands.

    Returns:
        Non-empty bands, left to right, each in drawing order. With no
        points, ``count`` <= 1, or all points on one vertical line the
        whole input is a single band.
    """
    if not points or count <= 1:
        return [list(points)]

    xs = np.array([p.x for p in points], dtype=float)
    min_x = xs.min()
    extent = xs.max() - min_x
    if extent <= 0:
        return [list(points)]

    band_width = extent / count
    indices = np.minimum(np.floor((xs - min_x) / band_width).astype(int), count - 1)

    bands = [[] for _ in range(count)]
    for point, idx in zip(points, indices):
        bands[idx].append(point)
    return [band for band in bands if band]


def fallback_extraction(drawing: DrawingData, expected_chars: Sequence[str],
                        isolator: CharacterIsolator | None = None) -> Dict[str, DrawingData]:
    """Extract characters by plain horizontal slicing.

    Args:
        drawing: The full capture.
        expected_chars: Characters in writing order.
        isolator: Normalizer for the bands; defaults to a new
            CharacterIsolator.

    Returns:
        Mapping of character to normalized band, zipped left to right.
        Empty bands are dropped first, so trailing characters may be
        missing.
    """
    isolator = isolator or CharacterIsolator()
    bands = slice_horizontally(drawing.points, len(expected_chars))
    return {
        char: isolator.normalize(drawing.with_points(band))
        for char, band in zip(expected_chars, bands)
    }
