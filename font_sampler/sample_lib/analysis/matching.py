"""Point extraction by bounds and left-to-right character matching."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..domain.geometry import BBox, DrawingPoint


def extract_by_bounds(points: Sequence[DrawingPoint],
                      bounds: Sequence[BBox]) -> List[List[DrawingPoint]]:
    """Collect the original points falling inside each box.

    Args:
        points: Full point sequence of the drawing, in drawing order.
        bounds: Character boxes.

    Returns:
        One list per box, preserving drawing order. Boxes may overlap, in
        which case a point is returned for every box containing it.
    """
    return [[p for p in points if box.contains(p)] for box in bounds]


def _min_x(segment: Sequence[DrawingPoint]) -> float:
    return min(p.x for p in segment) if segment else 0.0


def match_to_expected(segments: Sequence[Sequence[DrawingPoint]],
                      expected_chars: Sequence[str]) -> Dict[str, List[DrawingPoint]]:
    """Pair segments with expected characters in reading order.

    Segments are ordered by their leftmost point (an empty segment counts
    as x = 0) and zipped with ``expected_chars``. Extra segments or
    characters on either side are ignored.

    Args:
        segments: Point lists, one per character region.
        expected_chars: Characters in the order they were written.

    Returns:
        Mapping of character to its points, in ``expected_chars`` order.

    Example:
        >>> left = [DrawingPoint(10, 0)]
        >>> right = [DrawingPoint(90, 0)]
        >>> sorted(match_to_expected([right, left], ['a', 'b']).items())[0][1] == left
        True
    """
    ordered = sorted(segments, key=_min_x)
    return {char: list(segment) for char, segment in zip(expected_chars, ordered)}
