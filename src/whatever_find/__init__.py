"""
whatever-find - Core Package

A fast local file search library with smart pattern detection: queries are
matched against filenames as substrings, shell globs, regular expressions
or typo-tolerant fuzzy matches, and the mode can be inferred from the query.
"""

__version__ = "0.1.0"
__author__ = "whatever-find Team"

from .errors import FileSearchError, PatternSyntaxError, InvalidPathError, ConfigurationError
from .models import FinderConfig, SearchMode, FileIndex, FileMatch, SearchResults
from .searcher import FileSearcher
from .tools import (
    FSWalker,
    classify,
    fuzzy_score,
    match_substring,
    match_glob,
    match_regex,
    match_fuzzy,
    search,
    search_auto
)

__all__ = [
    'FileSearchError',
    'PatternSyntaxError',
    'InvalidPathError',
    'ConfigurationError',
    'FinderConfig',
    'SearchMode',
    'FileIndex',
    'FileMatch',
    'SearchResults',
    'FileSearcher',
    'FSWalker',
    'classify',
    'fuzzy_score',
    'match_substring',
    'match_glob',
    'match_regex',
    'match_fuzzy',
    'search',
    'search_auto'
]
