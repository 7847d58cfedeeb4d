"""Unit tests for character sets and writing prompts."""

import random
import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from writing_prompts import (
    CHARACTER_SETS,
    WRITING_PROMPTS,
    check_prompt_coverage,
    generate_comprehensive_prompts,
    get_character_group,
    get_character_set,
    get_unique_characters,
    get_writing_prompts,
)


class TestCharacterSets(unittest.TestCase):
    """Tests for get_character_set."""

    def test_default_is_lowercase(self):
        """Only lowercase letters by default."""
        self.assertEqual(get_character_set(), 'abcdefghijklmnopqrstuvwxyz')

    def test_groups_concatenated_in_order(self):
        """Enabled groups join in a fixed order."""
        charset = get_character_set(include_lowercase=False, include_uppercase=True,
                                    include_numbers=True)
        self.assertEqual(charset, CHARACTER_SETS['uppercase'] + CHARACTER_SETS['numbers'])

    def test_nothing_enabled(self):
        """All flags off gives an empty set."""
        self.assertEqual(get_character_set(include_lowercase=False), '')


class TestCharacterGroups(unittest.TestCase):
    """Tests for get_character_group."""

    def test_frequency_group(self):
        """Frequency groups are looked up by name."""
        self.assertEqual(get_character_group('low'), 'xjqz')

    def test_shape_group(self):
        """Shape groups are looked up by name."""
        self.assertEqual(get_character_group('tall'), 'bdfhklt')

    def test_unknown_group(self):
        """Unknown names raise KeyError."""
        with self.assertRaises(KeyError):
            get_character_group('wavy')


class TestWritingPrompts(unittest.TestCase):
    """Tests for get_writing_prompts."""

    def test_count_respected(self):
        """At most count prompts are returned."""
        self.assertEqual(len(get_writing_prompts(count=2)), 2)

    def test_count_larger_than_pool(self):
        """Asking for more than exist returns the whole pool once."""
        prompts = get_writing_prompts(include_lowercase=False, count=50)
        self.assertEqual(sorted(prompts), sorted(WRITING_PROMPTS['pangrams']))

    def test_seeded_is_repeatable(self):
        """The same seed gives the same prompts."""
        first = get_writing_prompts(count=5, rng=random.Random(7))
        second = get_writing_prompts(count=5, rng=random.Random(7))
        self.assertEqual(first, second)

    def test_categories_follow_flags(self):
        """Numbers prompts only appear when requested."""
        without = get_writing_prompts(count=50)
        with_numbers = get_writing_prompts(include_numbers=True, count=50)
        numbers = set(WRITING_PROMPTS['numbers'])
        self.assertFalse(numbers & set(without))
        self.assertTrue(numbers <= set(with_numbers))

    def test_lowercase_adds_challenging(self):
        """Lowercase prompts bring the challenging ones with them."""
        prompts = set(get_writing_prompts(count=50))
        self.assertTrue(set(WRITING_PROMPTS['challenging']) <= prompts)


class TestCoverage(unittest.TestCase):
    """Tests for coverage helpers."""

    def test_pangrams_cover_lowercase(self):
        """Every pangram alone covers the lowercase alphabet."""
        for pangram in WRITING_PROMPTS['pangrams']:
            coverage = check_prompt_coverage([pangram.lower()], CHARACTER_SETS['lowercase'])
            self.assertTrue(coverage.is_complete, pangram)

    def test_missing_in_target_order(self):
        """Missing characters keep the order of the target set."""
        coverage = check_prompt_coverage(["cab"], "abcxyz")
        self.assertEqual(coverage.covered, 'abc')
        self.assertEqual(coverage.missing, 'xyz')
        self.assertFalse(coverage.is_complete)

    def test_comprehensive_prompts_add_categories(self):
        """Digits and punctuation in the set pull in their prompts."""
        self.assertEqual(generate_comprehensive_prompts('abc'), WRITING_PROMPTS['pangrams'])
        prompts = generate_comprehensive_prompts('abc1!')
        self.assertTrue(set(WRITING_PROMPTS['numbers']) <= set(prompts))
        self.assertTrue(set(WRITING_PROMPTS['punctuation']) <= set(prompts))

    def test_unique_characters(self):
        """Repeats are dropped keeping first occurrence."""
        self.assertEqual(get_unique_characters('hello'), 'helo')


if __name__ == '__main__':
    unittest.main()
