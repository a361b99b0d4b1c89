"""
Unit tests for the similarity scoring module.

Tests the individual similarity measures and the combined fuzzy score,
including its range guarantees for degenerate inputs.
"""

import math

import pytest

from whatever_find.tools.similarity import (
    bigrams,
    fuzzy_score,
    levenshtein_similarity,
    ngram_similarity,
    subsequence_similarity,
)


SAMPLE_PAIRS = [
    ("", ""),
    ("", "abc"),
    ("abc", ""),
    ("main.rs", "man"),
    ("main.rs", "mian"),
    ("README.md", "readme"),
    ("config.toml", "confg"),
    ("xyz", "abc"),
    ("abcdefghij_k", "abcdefghijk"),
    ("a" * 50 + "_" + "b", "a" * 50 + "b"),
    ("日本語.txt", "日本"),
    ("Straße.txt", "strasse"),
    ("test_helper.py", "tst_hlpr"),
]


class TestFuzzyScore:
    """Test cases for the combined fuzzy score."""

    @pytest.mark.parametrize("filename", ["main.rs", "README.md", "", "a", "日本語.txt"])
    @pytest.mark.parametrize("case_sensitive", [True, False])
    def test_identical_strings_score_one(self, filename, case_sensitive):
        """Test that a filename always scores 1.0 against itself."""
        assert fuzzy_score(filename, filename, case_sensitive) == 1.0

    def test_case_insensitive_equality(self):
        """Test that differently cased names are equal when case-insensitive."""
        assert fuzzy_score("Main.rs", "main.RS", case_sensitive=False) == 1.0
        assert fuzzy_score("Main.rs", "main.RS", case_sensitive=True) < 1.0

    def test_unicode_lowercasing_keeps_sharp_s(self):
        """Test that 'ß' survives case normalization as a single character."""
        assert fuzzy_score("STRAßE.TXT", "straße.txt", case_sensitive=False) == 1.0
        # 'ß' and 'ss' are different characters, so the names only resemble each other
        assert fuzzy_score("Straße.txt", "STRASSE.TXT", case_sensitive=False) < 1.0

    @pytest.mark.parametrize("filename,query", [
        ("main.rs", "main"),
        ("main.rs", "rs"),
        ("a_very_long_filename_for_testing.txt", "x"),
        ("README.md", "readme"),
        ("config.toml", ""),
    ])
    def test_substring_scores_between_point_eight_and_point_nine(self, filename, query):
        """Test that a contained query scores within [0.8, 0.9]."""
        score = fuzzy_score(filename, query, case_sensitive=False)
        assert 0.8 <= score <= 0.9

    def test_substring_score_prefers_shorter_filenames(self):
        """Test that less extra content in the filename scores higher."""
        short = fuzzy_score("main.rs", "main", case_sensitive=False)
        long = fuzzy_score("main_window_controller.rs", "main", case_sensitive=False)
        assert short > long

    def test_substring_score_value(self):
        """Test the substring formula with codepoint lengths."""
        assert fuzzy_score("main.rs", "main", True) == pytest.approx(0.9 - 3 / 7 * 0.1)
        # 7 codepoints, although the UTF-8 encoding is longer
        assert fuzzy_score("日本語.txt", "日本", True) == pytest.approx(0.9 - 5 / 7 * 0.1)

    def test_empty_query_scores_substring_floor(self):
        """Test that the empty query is contained in every filename."""
        assert fuzzy_score("abc", "", case_sensitive=True) == pytest.approx(0.8)

    def test_empty_filename_with_query_scores_zero(self):
        """Test that an empty filename cannot match a non-empty query."""
        assert fuzzy_score("", "abc", case_sensitive=True) == 0.0

    def test_typo_is_tolerated(self):
        """Test that a query with a missing character still matches."""
        expected = (
            0.4 * (1 - 4 / 7)
            + 0.4 * ((3.4 / 7) * 0.4 + 0.4 + (2 / 3) * 0.2)
            + 0.2 * (1 / 6)
        )
        assert fuzzy_score("main.rs", "man", case_sensitive=False) == pytest.approx(expected)

    def test_unrelated_strings_score_zero(self):
        """Test that weak matches fall below the floor and score 0.0."""
        assert fuzzy_score("xyz", "abc", case_sensitive=False) == 0.0
        assert fuzzy_score("requirements.txt", "zzzz", case_sensitive=False) == 0.0

    @pytest.mark.parametrize("filename,query", SAMPLE_PAIRS)
    @pytest.mark.parametrize("case_sensitive", [True, False])
    def test_score_is_always_in_range(self, filename, query, case_sensitive):
        """Test that every score is a finite number within [0.0, 1.0]."""
        score = fuzzy_score(filename, query, case_sensitive)
        assert not math.isnan(score)
        assert 0.0 <= score <= 1.0

    @pytest.mark.parametrize("filename,query", SAMPLE_PAIRS)
    def test_non_equal_strings_never_score_one(self, filename, query):
        """Test that only equal strings reach the maximum score."""
        if filename.lower() != query.lower():
            assert fuzzy_score(filename, query, case_sensitive=False) < 1.0

    def test_scoring_is_deterministic(self):
        """Test that repeated calls return identical scores."""
        first = [fuzzy_score(f, q, False) for f, q in SAMPLE_PAIRS]
        second = [fuzzy_score(f, q, False) for f, q in SAMPLE_PAIRS]
        assert first == second


class TestLevenshteinSimilarity:
    """Test cases for the normalized edit-distance measure."""

    def test_classic_example(self):
        """Test the kitten/sitting example (distance 3)."""
        assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_identical(self):
        """Test that identical strings are fully similar."""
        assert levenshtein_similarity("main.rs", "main.rs") == 1.0

    def test_degenerate_cases(self):
        """Test the empty-string cases."""
        assert levenshtein_similarity("", "") == 1.0
        assert levenshtein_similarity("a", "") == 0.0
        assert levenshtein_similarity("", "a") == 0.0

    def test_counts_codepoints(self):
        """Test that multibyte characters count as one edit."""
        assert levenshtein_similarity("日本", "日木") == pytest.approx(0.5)


class TestSubsequenceSimilarity:
    """Test cases for the in-order subsequence measure."""

    def test_abbreviation(self):
        """Test an abbreviation with a broken run."""
        expected = (3.4 / 7) * 0.4 + 0.4 + (2 / 3) * 0.2
        assert subsequence_similarity("main.rs", "man") == pytest.approx(expected)

    def test_empty_query(self):
        """Test that the empty query is vacuously complete."""
        assert subsequence_similarity("anything", "") == 1.0
        assert subsequence_similarity("", "") == 1.0

    def test_missing_character(self):
        """Test that an unmatched query character zeroes the measure."""
        assert subsequence_similarity("main.rs", "mainz") == 0.0

    def test_out_of_order(self):
        """Test that characters must appear in query order."""
        assert subsequence_similarity("abc", "cb") == 0.0

    def test_coverage_is_clamped(self):
        """Test that long consecutive runs cannot push the measure above 1.0."""
        expected = 1.0 * 0.4 + 0.4 + (10 / 11) * 0.2
        assert subsequence_similarity("abcdefghij_k", "abcdefghijk") == pytest.approx(expected)
        assert subsequence_similarity("a" * 50 + "_b", "a" * 50 + "b") <= 1.0


class TestNgramSimilarity:
    """Test cases for the bigram overlap measure."""

    def test_bigrams_are_a_set(self):
        """Test that repeated windows are counted once."""
        assert bigrams("abab") == {"ab", "ba"}

    def test_short_strings(self):
        """Test that strings shorter than two characters are their own gram."""
        assert bigrams("a") == {"a"}
        assert bigrams("") == {""}

    def test_overlap(self):
        """Test the shared-over-larger-set ratio."""
        assert ngram_similarity("abc", "abd") == pytest.approx(0.5)
        assert ngram_similarity("main.rs", "man") == pytest.approx(1 / 6)

    def test_identical_and_disjoint(self):
        """Test the extremes of the measure."""
        assert ngram_similarity("ab", "ab") == 1.0
        assert ngram_similarity("a", "ab") == 0.0
        assert ngram_similarity("", "") == 1.0
