"""
Unit tests for search results models.

Tests FileMatch and SearchResults, including construction from engine
output, ranking and serialization.
"""

import pytest
from datetime import datetime
from pydantic import ValidationError

from whatever_find.models.search_mode import SearchMode
from whatever_find.models.search_results import FileMatch, SearchResults


class TestSearchMode:
    """Test cases for SearchMode enum."""

    def test_values(self):
        """Test the mode names."""
        assert [m.value for m in SearchMode] == ["substring", "glob", "regex", "fuzzy"]

    def test_from_string(self):
        """Test parsing mode names."""
        assert SearchMode.from_string("Glob") is SearchMode.GLOB
        assert SearchMode.from_string("  fuzzy ") is SearchMode.FUZZY

    def test_from_string_invalid(self):
        """Test parsing an unknown mode name."""
        with pytest.raises(ValueError, match="Invalid search mode"):
            SearchMode.from_string("semantic")

    def test_is_exact(self):
        """Test that only fuzzy mode is inexact."""
        assert SearchMode.SUBSTRING.is_exact() is True
        assert SearchMode.FUZZY.is_exact() is False

    def test_str(self):
        """Test string conversion."""
        assert str(SearchMode.REGEX) == "regex"


class TestFileMatch:
    """Test cases for FileMatch model."""

    def test_defaults(self):
        """Test that exact matches default to full score."""
        match = FileMatch(path="/a/src/main.rs")

        assert match.score == 1.0
        assert match.rank is None
        assert match.filename == "main.rs"
        assert match.directory == "/a/src"

    def test_invalid_score(self):
        """Test that scores outside [0, 1] are rejected."""
        with pytest.raises(ValidationError):
            FileMatch(path="/a/main.rs", score=1.5)

    def test_empty_path(self):
        """Test that an empty path is rejected."""
        with pytest.raises(ValidationError):
            FileMatch(path="")

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = FileMatch(path="/a/main.rs", score=0.5).to_dict()

        assert data['filename'] == "main.rs"
        assert data['directory'] == "/a"
        assert data['score'] == 0.5

    def test_str(self):
        """Test string conversion."""
        assert str(FileMatch(path="/a/main.rs", score=0.857)) == "/a/main.rs (score: 0.86)"


class TestSearchResults:
    """Test cases for SearchResults model."""

    def test_from_paths(self):
        """Test building results from an exact-mode path list."""
        results = SearchResults.from_paths("*.rs", "/a", SearchMode.GLOB, ["/a/lib.rs", "/a/main.rs"])

        assert results.mode is SearchMode.GLOB
        assert results.get_paths() == ["/a/lib.rs", "/a/main.rs"]
        assert [m.rank for m in results.matches] == [1, 2]
        assert all(m.score == 1.0 for m in results.matches)

    def test_from_scored(self):
        """Test building results from fuzzy output."""
        scored = [("/a/main.rs", 0.86), ("/a/mainx.rs", 0.85)]
        results = SearchResults.from_scored("main", "/a", scored, auto_detected=False)

        assert results.mode is SearchMode.FUZZY
        assert results.auto_detected is False
        assert [m.score for m in results.matches] == [0.86, 0.85]
        assert results.matches[1].rank == 2

    def test_mode_from_string(self):
        """Test that the mode may be given by name."""
        results = SearchResults(query="x", root=".", mode="regex")

        assert results.mode is SearchMode.REGEX
        assert results.get_match_count() == 0

    def test_get_top_matches(self):
        """Test taking the first N matches."""
        paths = [f"/a/f{i}.txt" for i in range(5)]
        results = SearchResults.from_paths("f", "/a", SearchMode.SUBSTRING, paths)

        assert [m.path for m in results.get_top_matches(2)] == paths[:2]
        assert results.get_match_count() == 5

    def test_limit_results(self):
        """Test truncating results keeps ranks consistent."""
        paths = [f"/a/f{i}.txt" for i in range(5)]
        results = SearchResults.from_paths("f", "/a", SearchMode.SUBSTRING, paths)

        results.limit_results(3)

        assert results.get_paths() == paths[:3]
        assert [m.rank for m in results.matches] == [1, 2, 3]

    def test_limit_results_non_positive(self):
        """Test that a non-positive limit leaves results untouched."""
        results = SearchResults.from_paths("f", "/a", SearchMode.SUBSTRING, ["/a/f.txt"])

        results.limit_results(0)

        assert results.get_match_count() == 1

    def test_to_dict(self):
        """Test dictionary conversion."""
        results = SearchResults.from_paths("main", "/a", SearchMode.SUBSTRING, ["/a/main.rs"],
                                           total_indexed=12)
        data = results.to_dict()

        assert data['mode'] == "substring"
        assert data['match_count'] == 1
        assert data['total_indexed'] == 12
        assert data['matches'][0]['filename'] == "main.rs"
        assert datetime.fromisoformat(data['timestamp']) == results.timestamp

    def test_str(self):
        """Test string conversion."""
        results = SearchResults.from_paths("main", "/a", SearchMode.SUBSTRING, ["/a/main.rs"],
                                           total_indexed=3, execution_time=0.25)

        assert str(results) == "Found 1 matches | Mode: substring (auto) | Indexed 3 files | Took 0.25s"
