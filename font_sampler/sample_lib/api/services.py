"""Service layer for handwriting sample extraction.

This module ties the analysis stages together into the operation the rest
of the application uses: turning one drawing of a written sentence into a
map of per-character samples. It also holds the helpers for merging freshly
extracted samples into a font's existing sample map.

The module contains:
    ExtractionService: Runs segmentation, bounds estimation, matching and
        isolation, falling back to horizontal slicing on failure.
    extract_characters_from_drawing: Module-level shortcut using default
        thresholds.
    merge_samples: Combine an existing sample map with new samples.
    remaining_characters: Target characters that still lack a sample.

Example usage:
    Extracting samples::

        from sample_lib.api.services import extract_characters_from_drawing

        samples = extract_characters_from_drawing(drawing, "the quick fox")
        for char, sample in samples.items():
            print(char, len(sample.points))

    Merging into stored samples::

        from sample_lib.api.services import merge_samples

        font_samples = merge_samples(font_samples, samples, character_set='abc')
"""

from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Optional

from ..analysis.bounds import BoundsCalculator
from ..analysis.fallback import fallback_extraction
from ..analysis.isolation import CharacterIsolator
from ..analysis.matching import extract_by_bounds, match_to_expected
from ..analysis.strokes import StrokeSegmenter
from ..domain.geometry import DrawingData

# Logger for service errors
_logger = logging.getLogger(__name__)


def prepare_expected_characters(text: str) -> List[str]:
    """Characters of ``text`` without whitespace, first occurrence only.

    Example:
        >>> prepare_expected_characters("hello world")
        ['h', 'e', 'l', 'o', 'w', 'r', 'd']
    """
    seen = []
    for char in text:
        if not char.isspace() and char not in seen:
            seen.append(char)
    return seen


class ExtractionService:
    """Extracts per-character samples from a handwritten sentence.

    Extraction never raises: failures in the stroke-based pipeline are
    logged and answered with the equal-width fallback, and a failing
    fallback yields an empty map.

    Attributes:
        segmenter: StrokeSegmenter for pen-lift detection.
        bounds_calculator: BoundsCalculator for character boxes.
        isolator: CharacterIsolator for connector removal and normalization.

    Example:
        >>> service = ExtractionService()
        >>> service.extract(DrawingData([], 400, 400), "abc")
        {}
    """

    def __init__(self, segmenter: Optional[StrokeSegmenter] = None,
                 bounds_calculator: Optional[BoundsCalculator] = None,
                 isolator: Optional[CharacterIsolator] = None):
        self.segmenter = segmenter or StrokeSegmenter()
        self.bounds_calculator = bounds_calculator or BoundsCalculator()
        self.isolator = isolator or CharacterIsolator(segmenter=self.segmenter)

    def extract(self, drawing: DrawingData, expected_characters: str) -> Dict[str, DrawingData]:
        """Extract character samples from a drawing.

        Args:
            drawing: Drawing of the written text.
            expected_characters: The text that was written. Whitespace is
                ignored and repeated characters count once.

        Returns:
            Mapping of character to normalized sample on the drawing's
            canvas. Keys are a subset of the expected characters; the map
            is empty when nothing could be extracted.
        """
        if drawing.is_empty:
            return {}

        chars = prepare_expected_characters(expected_characters)
        if not chars:
            return {}

        try:
            result = self._extract_by_strokes(drawing, chars)
        except Exception as e:
            _logger.warning("Stroke-based extraction failed, slicing instead: %s", e)
            result = {}

        if result:
            return result

        try:
            return fallback_extraction(drawing, chars, self.isolator)
        except Exception as e:
            _logger.warning("Fallback extraction also failed: %s", e)
            return {}

    def _extract_by_strokes(self, drawing: DrawingData, chars: List[str]) -> Dict[str, DrawingData]:
        strokes = self.segmenter.segment(drawing.points)
        bounds = self.bounds_calculator.compute(strokes, len(chars))
        segments = extract_by_bounds(drawing.points, bounds)
        matched = match_to_expected(segments, chars)
        _logger.debug("Matched %d of %d characters from %d strokes",
                      len(matched), len(chars), len(strokes))

        return {
            char: self.isolator.isolate_and_normalize(points, drawing.width, drawing.height)
            for char, points in matched.items()
            if points
        }


def extract_characters_from_drawing(drawing: DrawingData,
                                    expected_characters: str) -> Dict[str, DrawingData]:
    """Extract character samples using the default thresholds."""
    return ExtractionService().extract(drawing, expected_characters)


def merge_samples(existing: Mapping[str, DrawingData],
                  extracted: Mapping[str, DrawingData],
                  character_set: Optional[str] = None,
                  accepted: Optional[Mapping[str, bool]] = None) -> Dict[str, DrawingData]:
    """Combine a font's samples with newly extracted ones.

    Extracted samples replace existing samples for the same character
    wholesale. Neither input is modified.

    Args:
        existing: Current samples of the font.
        extracted: New samples, usually from ExtractionService.extract.
        character_set: If given, only characters in this string are taken
            from ``extracted``.
        accepted: If given, only characters the user marked True are taken
            from ``extracted``.

    Returns:
        New sample map.
    """
    merged = dict(existing)
    for char, sample in extracted.items():
        if character_set is not None and char not in character_set:
            continue
        if accepted is not None and not accepted.get(char, False):
            continue
        merged[char] = sample
    return merged


def remaining_characters(target: str, samples: Mapping[str, DrawingData]) -> str:
    """Characters of ``target`` that have no sample yet, in order."""
    return ''.join(char for char in target if char not in samples)
