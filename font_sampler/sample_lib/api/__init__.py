"""API layer for handwriting sample extraction.

This module exposes the high-level operations used by the web layer and any
other caller that holds drawings in memory.

Example usage::

    from sample_lib.api import ExtractionService

    service = ExtractionService()
    samples = service.extract(drawing, "pack my box")
"""

from .services import (
    ExtractionService,
    extract_characters_from_drawing,
    merge_samples,
    prepare_expected_characters,
    remaining_characters,
)

__all__ = [
    'ExtractionService', 'extract_characters_from_drawing',
    'prepare_expected_characters', 'merge_samples', 'remaining_characters',
]
