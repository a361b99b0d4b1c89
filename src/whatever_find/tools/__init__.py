"""
Search tools and utilities for whatever-find.

This module contains the matching engine (classifier, matchers, similarity
scoring and search orchestration) and the filesystem walker that builds the
index the engine searches.
"""

from .case_policy import fold_case
from .classifier import classify
from .fs_walker import FSWalker
from .search_engine import (
    match_substring,
    match_glob,
    match_regex,
    match_fuzzy,
    search,
    search_auto
)
from .similarity import fuzzy_score

__all__ = [
    'fold_case',
    'classify',
    'FSWalker',
    'match_substring',
    'match_glob',
    'match_regex',
    'match_fuzzy',
    'search',
    'search_auto',
    'fuzzy_score'
]
