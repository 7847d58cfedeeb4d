"""JSON encoding of samples.

Samples are stored as a JSON array of ``{x, y, pressure}`` objects per
character, with ``pressure`` omitted when the device did not report it.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Sequence

from ..domain.errors import SampleFormatError
from ..domain.geometry import DrawingData, DrawingPoint


def points_to_json(points: Sequence[DrawingPoint]) -> str:
    """Encode points as the stored JSON array."""
    return json.dumps([p.to_dict() for p in points])


def points_from_json(text: str) -> List[DrawingPoint]:
    """Decode a stored JSON point array.

    Raises:
        SampleFormatError: If the text is not JSON or not an array of
            points.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SampleFormatError(f"Invalid point JSON: {e}") from e
    if not isinstance(data, list):
        raise SampleFormatError("Point JSON must be an array")
    return [DrawingPoint.from_dict(p) for p in data]


def samples_to_dict(samples: Mapping[str, DrawingData]) -> Dict[str, Dict[str, Any]]:
    """Convert a sample map to plain dictionaries."""
    return {char: sample.to_dict() for char, sample in samples.items()}


def samples_from_dict(data: Mapping[str, Any]) -> Dict[str, DrawingData]:
    """Build a sample map from plain dictionaries.

    Raises:
        SampleFormatError: If a key is not a single character or a value
            is not a drawing.
    """
    if not isinstance(data, dict):
        raise SampleFormatError("Samples must be an object")
    samples = {}
    for char, value in data.items():
        if len(char) != 1:
            raise SampleFormatError(f"Sample key must be a single character: {char!r}")
        samples[char] = DrawingData.from_dict(value)
    return samples
