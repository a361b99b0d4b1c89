"""
Search orchestration over a filename index.

The functions here apply a matcher to every entry of a FileIndex and order
the aggregated paths deterministically, independent of the index's
iteration order. They are pure: the index is only read, nothing is cached
between calls, and concurrent calls need no synchronization.
"""

import logging
from typing import List, Tuple

from ..models.search_mode import SearchMode
from ..models.search_results import FileIndex, ScoredPath
from .classifier import classify
from .matchers import compile_matcher


logger = logging.getLogger(__name__)


def match_substring(index: FileIndex, query: str, case_sensitive: bool) -> List[str]:
    """
    Find paths whose filename contains the query.

    An empty query matches every filename.

    Returns:
        Lexicographically sorted list of matching paths
    """
    return _match_exact(index, query, SearchMode.SUBSTRING, case_sensitive)


def match_glob(index: FileIndex, query: str, case_sensitive: bool) -> List[str]:
    """
    Find paths whose filename matches a shell wildcard pattern.

    Returns:
        Lexicographically sorted list of matching paths

    Raises:
        PatternSyntaxError: If the query is not a valid glob pattern
    """
    return _match_exact(index, query, SearchMode.GLOB, case_sensitive)


def match_regex(index: FileIndex, query: str, case_sensitive: bool) -> List[str]:
    """
    Find paths whose filename contains a match for a regular expression.

    Returns:
        Lexicographically sorted list of matching paths

    Raises:
        PatternSyntaxError: If the query is not a valid regular expression
    """
    return _match_exact(index, query, SearchMode.REGEX, case_sensitive)


def match_fuzzy(index: FileIndex, query: str, case_sensitive: bool) -> List[ScoredPath]:
    """
    Rank paths by how closely their filename resembles the query.

    Filenames scoring 0.0 are dropped. Every path under a matching filename
    gets that filename's score.

    Returns:
        List of (path, score) pairs, highest score first; equal scores are
        ordered by path
    """
    matcher = compile_matcher(SearchMode.FUZZY, query, case_sensitive)

    scored: List[ScoredPath] = []
    for filename, paths in index.items():
        score = matcher.score(filename)
        if score > 0.0:
            scored.extend((path, score) for path in paths)

    scored.sort(key=lambda item: (-item[1], item[0]))

    logger.debug(f"Fuzzy query '{query}' matched {len(scored)} paths from {len(index)} filenames")
    return scored


def search(index: FileIndex, query: str, mode: SearchMode, case_sensitive: bool) -> List[str]:
    """
    Search with an explicitly chosen mode.

    Fuzzy results keep their relevance order but drop the scores.

    Raises:
        PatternSyntaxError: If a glob or regex query is malformed
    """
    if mode.is_exact():
        return _match_exact(index, query, mode, case_sensitive)
    return [path for path, _ in match_fuzzy(index, query, case_sensitive)]


def search_auto(index: FileIndex, query: str, case_sensitive: bool) -> Tuple[List[str], SearchMode]:
    """
    Classify the query and search with the inferred mode.

    Returns:
        Tuple of (sorted matching paths, the mode that was used)

    Raises:
        PatternSyntaxError: If the query looks like a pattern but is malformed
    """
    mode = classify(query)
    logger.debug(f"Auto-detected {mode.value} mode for query '{query}'")
    return search(index, query, mode, case_sensitive), mode


def _match_exact(index: FileIndex, query: str, mode: SearchMode, case_sensitive: bool) -> List[str]:
    """Apply an exact-mode matcher to every index entry and sort the paths."""
    matcher = compile_matcher(mode, query, case_sensitive)

    results: List[str] = []
    for filename, paths in index.items():
        if matcher.matches(filename):
            results.extend(paths)

    results.sort()

    logger.debug(f"{mode.value.capitalize()} query '{query}' matched {len(results)} paths")
    return results
