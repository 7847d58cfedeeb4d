"""Service functions for sample route handlers.

This module provides the business logic for the sample API, kept out of
sample_routes.py so it can be tested without a request context.

Services:
    - Extraction (drawing + text to per-character samples)
    - Sample map merging
    - Preview rendering
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from sample_lib.api import ExtractionService, merge_samples, prepare_expected_characters, remaining_characters
from sample_lib.domain import DrawingData
from sample_lib.utils import render_sample_png, samples_from_dict, samples_to_dict

logger = logging.getLogger(__name__)

extraction_service = ExtractionService()


@dataclass
class ExtractionResult:
    """Outcome of one extraction request."""
    samples: dict[str, DrawingData]
    extracted: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            'samples': samples_to_dict(self.samples),
            'extracted': self.extracted,
            'missing': self.missing,
        }


def extract_samples(drawing: DrawingData, characters: str) -> ExtractionResult:
    """Extract samples and report which expected characters were found.

    Args:
        drawing: Drawing of the written text.
        characters: Text the user was asked to write.

    Returns:
        ExtractionResult with the samples, the characters found and the
        expected characters that are missing, both in writing order.
    """
    expected = prepare_expected_characters(characters)
    samples = extraction_service.extract(drawing, characters)
    extracted = [c for c in expected if c in samples]
    missing = [c for c in expected if c not in samples]
    logger.info("Extracted %d/%d characters from %d points",
                len(extracted), len(expected), len(drawing.points))
    return ExtractionResult(samples=samples, extracted=extracted, missing=missing)


def merge_sample_payload(existing: dict, extracted: dict,
                         characters: str | None = None,
                         accepted: dict | None = None) -> tuple[dict[str, DrawingData], str]:
    """Merge JSON sample maps and list the characters still to capture.

    Args:
        existing: Stored samples as plain dictionaries.
        extracted: New samples as plain dictionaries.
        characters: Target character set of the font, if known.
        accepted: Per-character acceptance flags from the review screen.

    Returns:
        tuple: (merged samples, remaining characters). The remaining string
            is empty when ``characters`` is not given.

    Raises:
        SampleFormatError: If either map is malformed.
    """
    merged = merge_samples(
        samples_from_dict(existing),
        samples_from_dict(extracted),
        character_set=characters,
        accepted=accepted,
    )
    remaining = remaining_characters(characters, merged) if characters else ''
    return merged, remaining


def render_preview(drawing: DrawingData, size: int | None = None) -> bytes:
    """Render a drawing as PNG bytes."""
    return render_sample_png(drawing, size=size)
