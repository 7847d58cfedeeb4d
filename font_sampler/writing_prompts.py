"""Character sets and writing prompts for sample capture.

The capture screens ask the user to write whole sentences rather than
single letters. This module provides the character sets a font can target,
the sentences offered for writing, and helpers to check that a set of
prompts covers every character of a target set.

Typical usage example:

    from writing_prompts import get_character_set, get_writing_prompts, check_prompt_coverage

    charset = get_character_set(include_numbers=True)
    prompts = get_writing_prompts(include_numbers=True, count=4)
    coverage = check_prompt_coverage(prompts, charset)
    print(f"Still missing: {coverage.missing}")
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass

CHARACTER_SETS = {
    'lowercase': 'abcdefghijklmnopqrstuvwxyz',
    'uppercase': 'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'numbers': '0123456789',
    'basic_punctuation': '.,?!:;',
    'extended_punctuation': '@#$%&*()_+-=[]{}\\|/<>"\'`~',
}

# Letters grouped by frequency in English text
FREQUENCY_GROUPS = {
    'high': 'etaoinsrhldcu',
    'medium': 'mfpgwybvk',
    'low': 'xjqz',
}

# Letters sharing shapes, useful for practice sheets
SIMILAR_CHARACTER_GROUPS = {
    'round': 'oecapqd',
    'tall': 'bdfhklt',
    'descending': 'gjpqy',
    'straight': 'ilvmwnz',
    'curved': 'cefghosuz',
}

WRITING_PROMPTS = {
    # Sentences using every letter of the alphabet
    'pangrams': [
        "The quick brown fox jumps over the lazy dog.",
        "Pack my box with five dozen liquor jugs.",
        "Amazingly few discotheques provide jukeboxes.",
        "How vexingly quick daft zebras jump!",
    ],
    'lowercase': [
        "minimum wine gives us warmth in winter",
        "seven zany elephants jumped quickly over the fence",
        "my favorite jazz music plays on the radio every evening",
    ],
    'uppercase': [
        "CAPITAL LETTERS ARE USED AT THE START OF SENTENCES",
        "NEW YORK AND LONDON ARE MAJOR CITIES",
        "JFK AIRPORT IS LOCATED IN QUEENS",
    ],
    'numbers': [
        "The code to unlock the safe is 7294-1586.",
        "In 2023, there were 365 days just like in most years.",
        "My phone number changed to 555-0123 last month.",
    ],
    'punctuation': [
        "Wait! Did you hear that? I'm not sure what it was.",
        "Here's a list: apples, oranges, bananas, and grapes.",
        "The email address is johndoe@example.com (not case-sensitive).",
    ],
    # Difficult letter combinations, mostly lowercase
    'challenging': [
        "She sells seashells by the seashore.",
        "Unique New York, unique New York, you know you need unique New York.",
        "Six sticky skeletons skipped through the streets.",
    ],
}


@dataclass
class PromptCoverage:
    """Which characters of a target set a group of prompts contains.

    Attributes:
        covered: Target characters present in the prompts, in target order.
        missing: Target characters absent from the prompts, in target order.
    """
    covered: str
    missing: str

    @property
    def is_complete(self) -> bool:
        return not self.missing


def get_character_set(include_lowercase: bool = True,
                      include_uppercase: bool = False,
                      include_numbers: bool = False,
                      include_basic_punctuation: bool = False,
                      include_extended_punctuation: bool = False) -> str:
    """Build a target character set from the named groups."""
    parts = [
        (include_lowercase, 'lowercase'),
        (include_uppercase, 'uppercase'),
        (include_numbers, 'numbers'),
        (include_basic_punctuation, 'basic_punctuation'),
        (include_extended_punctuation, 'extended_punctuation'),
    ]
    return ''.join(CHARACTER_SETS[name] for enabled, name in parts if enabled)


def get_character_group(name: str) -> str:
    """Letters of a named frequency or shape group, e.g. 'low' or 'tall'.

    Raises:
        KeyError: If ``name`` is not a known group.
    """
    if name in FREQUENCY_GROUPS:
        return FREQUENCY_GROUPS[name]
    return SIMILAR_CHARACTER_GROUPS[name]


def get_writing_prompts(include_lowercase: bool = True,
                        include_uppercase: bool = False,
                        include_numbers: bool = False,
                        include_punctuation: bool = False,
                        count: int = 3,
                        rng: random.Random | None = None) -> list[str]:
    """Pick writing prompts for the requested character types.

    Pangrams are always candidates. Lowercase adds the lowercase and the
    challenging prompts; the other flags add their own category.

    Args:
        include_lowercase: Offer lowercase-focused prompts.
        include_uppercase: Offer uppercase prompts.
        include_numbers: Offer prompts containing digits.
        include_punctuation: Offer punctuation-heavy prompts.
        count: Maximum number of prompts to return.
        rng: Random source for shuffling; pass a seeded instance for
            repeatable results.

    Returns:
        Up to ``count`` distinct prompts in shuffled order.
    """
    available = list(WRITING_PROMPTS['pangrams'])
    if include_lowercase:
        available += WRITING_PROMPTS['lowercase']
    if include_uppercase:
        available += WRITING_PROMPTS['uppercase']
    if include_numbers:
        available += WRITING_PROMPTS['numbers']
    if include_punctuation:
        available += WRITING_PROMPTS['punctuation']
    if include_lowercase:
        available += WRITING_PROMPTS['challenging']

    rng = rng or random.Random()
    rng.shuffle(available)
    return available[:max(0, count)]


def generate_comprehensive_prompts(character_set: str) -> list[str]:
    """Prompts that together cover letters, digits and punctuation of a set.

    Pangrams cover the letters. Number prompts are added when the set holds
    a digit and punctuation prompts when it holds anything that is neither
    a word character nor whitespace.
    """
    prompts = list(WRITING_PROMPTS['pangrams'])
    if re.search(r'\d', character_set):
        prompts += WRITING_PROMPTS['numbers']
    if re.search(r'[^\w\s]', character_set):
        prompts += WRITING_PROMPTS['punctuation']
    return prompts


def get_unique_characters(text: str) -> str:
    """Characters of ``text`` in first-seen order, each once."""
    return ''.join(dict.fromkeys(text))


def check_prompt_coverage(prompts: list[str], character_set: str) -> PromptCoverage:
    """Check which characters of ``character_set`` appear in ``prompts``."""
    present = set(''.join(prompts))
    covered = ''.join(c for c in character_set if c in present)
    missing = ''.join(c for c in character_set if c not in present)
    return PromptCoverage(covered=covered, missing=missing)
