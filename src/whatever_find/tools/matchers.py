"""
Per-filename matchers for the four search modes.

A matcher is built once per search call by compile_matcher and then applied
to every filename in the index, so glob and regex patterns are compiled a
single time. Matchers never look at the filesystem and never see full paths.
"""

import re
import fnmatch
import logging
from dataclasses import dataclass
from typing import Pattern, Union

from ..errors import PatternSyntaxError
from ..models.search_mode import SearchMode
from .case_policy import fold_case
from .similarity import fuzzy_score


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubstringMatcher:
    """
    Matches filenames containing the query; the empty query matches everything.

    ``query`` is stored already folded to the active case policy.
    """
    query: str
    case_sensitive: bool

    def matches(self, filename: str) -> bool:
        return self.query in fold_case(filename, self.case_sensitive)


@dataclass(frozen=True)
class GlobMatcher:
    """Matches whole filenames against a compiled shell wildcard pattern."""
    pattern: Pattern[str]
    case_sensitive: bool

    def matches(self, filename: str) -> bool:
        return self.pattern.match(fold_case(filename, self.case_sensitive)) is not None


@dataclass(frozen=True)
class RegexMatcher:
    """Searches filenames with a compiled regular expression (unanchored)."""
    pattern: Pattern[str]

    def matches(self, filename: str) -> bool:
        return self.pattern.search(filename) is not None


@dataclass(frozen=True)
class FuzzyMatcher:
    """Scores filenames by similarity; a score of 0.0 means no match."""
    query: str
    case_sensitive: bool

    def score(self, filename: str) -> float:
        return fuzzy_score(filename, self.query, self.case_sensitive)


Matcher = Union[SubstringMatcher, GlobMatcher, RegexMatcher, FuzzyMatcher]


def compile_matcher(mode: SearchMode, query: str, case_sensitive: bool) -> Matcher:
    """
    Build the matcher for one search call.

    Args:
        mode: Search mode to build a matcher for
        query: Query text as supplied by the caller
        case_sensitive: Whether comparisons respect case

    Returns:
        A matcher ready to be applied to every filename in the index

    Raises:
        PatternSyntaxError: If the query is not a valid glob or regex pattern
    """
    if mode is SearchMode.SUBSTRING:
        return SubstringMatcher(fold_case(query, case_sensitive), case_sensitive)
    if mode is SearchMode.GLOB:
        return GlobMatcher(compile_glob(query, case_sensitive), case_sensitive)
    if mode is SearchMode.REGEX:
        return RegexMatcher(compile_regex(query, case_sensitive))
    if mode is SearchMode.FUZZY:
        return FuzzyMatcher(query, case_sensitive)
    raise ValueError(f"Unsupported search mode: {mode}")


def compile_glob(pattern: str, case_sensitive: bool) -> Pattern[str]:
    """
    Compile a shell wildcard pattern into an anchored regular expression.

    Supports ``*`` (any run of characters), ``?`` (one character) and
    ``[...]`` / ``[!...]`` character classes. In case-insensitive mode the
    pattern source is folded here and the filename is folded at match time.

    Raises:
        PatternSyntaxError: If the pattern has an unterminated character
            class or a misplaced recursive wildcard
    """
    _check_glob_syntax(pattern)

    source = fold_case(pattern, case_sensitive)
    try:
        compiled = re.compile(fnmatch.translate(source))
    except re.error as e:
        raise PatternSyntaxError(pattern, SearchMode.GLOB.value, str(e)) from e

    logger.debug(f"Compiled glob '{pattern}' to {compiled.pattern!r}")
    return compiled


def _check_glob_syntax(pattern: str) -> None:
    """Reject wildcard constructs that fnmatch would silently accept."""
    i = 0
    length = len(pattern)

    while i < length:
        ch = pattern[i]

        if ch == '*':
            end = i
            while end < length and pattern[end] == '*':
                end += 1
            stars = end - i
            if stars > 2:
                raise PatternSyntaxError(pattern, SearchMode.GLOB.value,
                                         f"wildcard run of {stars} '*' at position {i}")
            if stars == 2:
                # ** is only valid as a whole path component
                starts_component = i == 0 or pattern[i - 1] == '/'
                ends_component = end == length or pattern[end] == '/'
                if not (starts_component and ends_component):
                    raise PatternSyntaxError(
                        pattern, SearchMode.GLOB.value,
                        f"recursive wildcard '**' must form a whole path component (position {i})")
            i = end
            continue

        if ch == '[':
            close = i + 1
            if close < length and pattern[close] == '!':
                close += 1
            # a leading ']' is part of the class
            if close < length and pattern[close] == ']':
                close += 1
            close = pattern.find(']', close)
            if close == -1:
                raise PatternSyntaxError(pattern, SearchMode.GLOB.value,
                                         f"unterminated character class at position {i}")
            i = close + 1
            continue

        i += 1


def compile_regex(pattern: str, case_sensitive: bool) -> Pattern[str]:
    """
    Compile a regular expression for filename searching.

    Case-insensitive mode compiles with IGNORECASE instead of folding the
    pattern, so escapes and character classes in the query keep their
    meaning.

    Raises:
        PatternSyntaxError: If the pattern is not a valid regular expression
    """
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        compiled = re.compile(pattern, flags)
    except re.error as e:
        raise PatternSyntaxError(pattern, SearchMode.REGEX.value, str(e)) from e

    logger.debug(f"Compiled regex '{pattern}' (case_sensitive={case_sensitive})")
    return compiled
