"""
Data models for whatever-find.

This module contains the core data structures used throughout the system.
"""

from .config import FinderConfig
from .search_mode import SearchMode
from .search_results import FileIndex, FileMatch, ScoredPath, SearchResults

__all__ = ['FinderConfig', 'SearchMode', 'FileIndex', 'FileMatch', 'ScoredPath', 'SearchResults']
