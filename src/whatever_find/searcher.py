"""
High-level file searching for whatever-find.

FileSearcher ties the filesystem walker and the matching engine together:
each call indexes the given root with the searcher's configuration and then
runs the query against that index. The async variants run the same blocking
work in a worker thread so an event loop stays responsive.
"""

import asyncio
import logging
import time
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .models.config import FinderConfig
from .models.search_mode import SearchMode
from .models.search_results import FileIndex, ScoredPath, SearchResults
from .tools import search_engine
from .tools.classifier import classify
from .tools.fs_walker import FSWalker


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileSearcher:
    """
    Search a directory tree for files by name.

    Example:
        >>> searcher = FileSearcher(FinderConfig(case_sensitive=True))
        >>> paths, mode = searcher.search_auto_with_mode(".", "*.py")
    """

    def __init__(self, config: Optional[FinderConfig] = None):
        self._config = config or FinderConfig()

    @property
    def config(self) -> FinderConfig:
        return self._config

    def set_config(self, config: FinderConfig) -> None:
        self._config = config

    def build_index(self, root: PathLike) -> FileIndex:
        """
        Index a directory tree with this searcher's configuration.

        Raises:
            InvalidPathError: If the root does not exist or is not a directory
        """
        return FSWalker(self._config).build_index(root)

    def search_auto(self, root: PathLike, query: str) -> List[str]:
        """Search with the mode inferred from the query."""
        paths, _ = self.search_auto_with_mode(root, query)
        return paths

    def search_auto_with_mode(self, root: PathLike, query: str) -> Tuple[List[str], SearchMode]:
        """Search with the mode inferred from the query and report that mode."""
        index = self.build_index(root)
        return search_engine.search_auto(index, query, self._config.case_sensitive)

    def search(self, root: PathLike, query: str, mode: SearchMode) -> List[str]:
        """Search with an explicitly chosen mode."""
        index = self.build_index(root)
        return search_engine.search(index, query, mode, self._config.case_sensitive)

    def search_fuzzy(self, root: PathLike, query: str) -> List[ScoredPath]:
        """Rank files by how closely their name resembles the query."""
        index = self.build_index(root)
        return search_engine.match_fuzzy(index, query, self._config.case_sensitive)

    def find(self, root: PathLike, query: str, mode: Optional[SearchMode] = None) -> SearchResults:
        """
        Search and package the outcome as a SearchResults object.

        Args:
            root: Directory tree to search
            query: Query text
            mode: Search mode to force; None infers it from the query

        Returns:
            SearchResults with the matches in engine order, scores included
            for fuzzy mode

        Raises:
            InvalidPathError: If the root does not exist or is not a directory
            PatternSyntaxError: If a glob or regex query is malformed
        """
        start_time = time.perf_counter()
        index = self.build_index(root)
        case_sensitive = self._config.case_sensitive
        total_indexed = sum(len(paths) for paths in index.values())

        auto_detected = mode is None
        if mode is None:
            mode = classify(query)

        if mode.is_exact():
            paths = search_engine.search(index, query, mode, case_sensitive)
            results = SearchResults.from_paths(
                query, str(root), mode, paths,
                auto_detected=auto_detected,
                total_indexed=total_indexed
            )
        else:
            scored = search_engine.match_fuzzy(index, query, case_sensitive)
            results = SearchResults.from_scored(
                query, str(root), scored,
                auto_detected=auto_detected,
                total_indexed=total_indexed
            )

        results.execution_time = time.perf_counter() - start_time
        logger.info(f"Search '{query}' in {root}: {results}")
        return results

    async def search_auto_async(self, root: PathLike, query: str) -> List[str]:
        return await asyncio.to_thread(self.search_auto, root, query)

    async def search_auto_with_mode_async(self, root: PathLike, query: str) -> Tuple[List[str], SearchMode]:
        return await asyncio.to_thread(self.search_auto_with_mode, root, query)

    async def search_async(self, root: PathLike, query: str, mode: SearchMode) -> List[str]:
        return await asyncio.to_thread(self.search, root, query, mode)

    async def search_fuzzy_async(self, root: PathLike, query: str) -> List[ScoredPath]:
        return await asyncio.to_thread(self.search_fuzzy, root, query)
