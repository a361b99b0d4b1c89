"""
Filesystem walker for whatever-find.

This module builds the filename index the matching engine searches. It
traverses a directory tree, applies the configured depth, hidden-file,
ignore-pattern and size constraints, and groups the surviving files by
their (case-normalized) name.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Union

from ..errors import InvalidPathError
from ..models.config import FinderConfig
from ..models.search_results import FileIndex
from .case_policy import fold_case


logger = logging.getLogger(__name__)


class FSWalker:
    """
    Filesystem walker that indexes files by name.

    This class provides directory traversal with support for:
    - Maximum depth (1 means only entries directly inside the root)
    - Skipping hidden files and directories
    - Ignore patterns (names, path fragments and wildcards)
    - Maximum file size
    """

    def __init__(self, config: FinderConfig):
        """
        Args:
            config: Depth, hidden-entry, ignore, size and case settings
        """
        self.config = config
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'files_indexed': 0,
            'directories_traversed': 0,
            'files_ignored': 0,
            'files_too_large': 0,
            'errors': 0
        }

    def build_index(self, root: Union[str, Path]) -> FileIndex:
        """
        Walk a directory tree and index every accepted file by name.

        Args:
            root: Root directory to index

        Returns:
            Mapping from filename (case-folded unless the configuration is
            case-sensitive) to the full paths of all files with that name

        Raises:
            InvalidPathError: If the root does not exist or is not a directory
        """
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise InvalidPathError(str(root), "path does not exist")
        if not root_path.is_dir():
            raise InvalidPathError(str(root), "path is not a directory")

        root_path = root_path.resolve()
        logger.info(f"Indexing directory tree: {root_path}")

        index: FileIndex = {}
        for current_dir, subdirs, files in os.walk(root_path, onerror=self._on_walk_error):
            current_path = Path(current_dir)
            self._stats['directories_traversed'] += 1

            # Entries of this directory sit at depth + 1; files of its
            # subdirectories would sit at depth + 2
            depth = len(current_path.relative_to(root_path).parts)
            max_depth = self.config.max_depth

            if max_depth is not None and depth + 1 >= max_depth:
                subdirs[:] = []
            else:
                subdirs[:] = sorted(
                    d for d in subdirs
                    if not self._should_skip(current_path / d, root_path)
                )

            for filename in files:
                file_path = current_path / filename

                if self._should_skip(file_path, root_path):
                    self._stats['files_ignored'] += 1
                    continue

                if self._exceeds_size_limit(file_path):
                    continue

                key = fold_case(filename, self.config.case_sensitive)
                index.setdefault(key, []).append(str(file_path))
                self._stats['files_indexed'] += 1

        logger.info(f"Indexed {self._stats['files_indexed']} files under {root_path}")
        return index

    def should_ignore(self, path: Union[str, Path]) -> bool:
        """
        Check if a path would be skipped by the hidden-file or ignore rules.

        Args:
            path: Path to check, ideally relative to the search root

        Returns:
            True if the path should be skipped
        """
        return self.config.is_hidden(Path(path).name) or self.config.should_ignore(path)

    def _should_skip(self, path: Path, root_path: Path) -> bool:
        """Apply ignore rules to a path relative to the root being walked."""
        return self.should_ignore(path.relative_to(root_path))

    def _exceeds_size_limit(self, file_path: Path) -> bool:
        """Check a file against max_file_size; unreadable files are skipped too."""
        if self.config.max_file_size is None:
            return False

        try:
            size = file_path.stat().st_size
        except OSError as e:
            logger.warning(f"Cannot stat {file_path}: {e}")
            self._stats['errors'] += 1
            return True

        if size > self.config.max_file_size:
            logger.debug(f"Skipping large file: {file_path} ({size} bytes)")
            self._stats['files_too_large'] += 1
            return True

        return False

    def _on_walk_error(self, error: OSError) -> None:
        logger.warning(f"Error walking directory {error.filename}: {error}")
        self._stats['errors'] += 1

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the last indexing operations.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()
