"""
Configuration model for whatever-find.

FinderConfig holds the settings that decide which files make it into the
index (depth, hidden entries, ignore patterns, file size) and how queries
are compared with filenames (case sensitivity).
"""

from typing import Dict, List, Optional, Any, Pattern, Union
from pathlib import PurePath
import re
import fnmatch
from pydantic import BaseModel, Field, PrivateAttr, field_validator


DEFAULT_IGNORE_PATTERNS = [
    "*.tmp",
    "*.log",
    ".git",
    "node_modules",
    "target",
]

# Depths beyond this are almost always a misconfiguration
DEEP_DEPTH_WARNING = 64

WILDCARD_CHARS = ('*', '?')


class FinderConfig(BaseModel):
    """
    Indexing and matching settings.

    The matching engine only reads ``case_sensitive``; everything else is
    consumed by the filesystem indexer.

    Attributes:
        max_depth: Deepest level to index, 1 being the search root itself
            (None for no limit)
        ignore_hidden: Skip entries whose name starts with '.'
        ignore_patterns: Entry names, path fragments or wildcards to skip
        case_sensitive: Compare filenames with their case preserved
        max_file_size: Skip files larger than this many bytes (None for no limit)
    """

    max_depth: Optional[int] = Field(None, gt=0, description="Deepest directory level to index")
    ignore_hidden: bool = Field(True, description="Skip entries whose name starts with a dot")
    ignore_patterns: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS),
        description="Entry names, path fragments or wildcards to skip"
    )
    case_sensitive: bool = Field(False, description="Compare filenames with their case preserved")
    max_file_size: Optional[int] = Field(None, gt=0, description="Largest file to index, in bytes")

    _name_globs: List[Pattern[str]] = PrivateAttr(default_factory=list)
    _literals: List[str] = PrivateAttr(default_factory=list)

    @field_validator('ignore_patterns')
    @classmethod
    def validate_ignore_patterns(cls, v: List[str]) -> List[str]:
        stripped = [pattern.strip() for pattern in v]
        if not all(stripped):
            raise ValueError("ignore patterns cannot be empty")
        return stripped

    def model_post_init(self, __context) -> None:
        """Split ignore patterns into compiled wildcards and literal fragments."""
        self._name_globs = []
        self._literals = []
        for pattern in self.ignore_patterns:
            if any(ch in pattern for ch in WILDCARD_CHARS):
                try:
                    self._name_globs.append(re.compile(fnmatch.translate(pattern)))
                except re.error as e:
                    raise ValueError(f"Invalid ignore pattern '{pattern}': {e}")
            else:
                self._literals.append(pattern)

    def should_ignore(self, path: Union[str, PurePath]) -> bool:
        """
        Check a path against the ignore patterns.

        Wildcard patterns must match the entry's whole name. Literal
        patterns match when they equal the name or appear anywhere in the
        path, so ``node_modules`` also covers everything beneath it.

        Args:
            path: Entry path, normally relative to the search root

        Returns:
            True if the entry should be left out of the index
        """
        pure = PurePath(path)
        name = pure.name
        if any(glob.match(name) for glob in self._name_globs):
            return True

        posix = pure.as_posix()
        return any(name == literal or literal in posix for literal in self._literals)

    def is_hidden(self, name: str) -> bool:
        """True if ``name`` is a dot-entry and hidden entries are skipped."""
        return self.ignore_hidden and name.startswith('.')

    def validate_configuration(self) -> List[str]:
        """
        Report settings that are valid but probably unintended.

        Returns:
            Warning messages, empty when nothing looks suspicious
        """
        notes = []

        if not self.ignore_hidden and not self.ignore_patterns:
            notes.append("Hidden files are included and no ignore patterns are set; "
                         "version control and build directories will be indexed")

        if self.max_depth is not None and self.max_depth > DEEP_DEPTH_WARNING:
            notes.append(f"Very deep max_depth ({self.max_depth}) is effectively unlimited")

        return notes

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FinderConfig':
        return cls.model_validate(data)

    def __str__(self) -> str:
        depth = self.max_depth if self.max_depth is not None else 'unlimited'
        parts = [
            f"Max depth: {depth}",
            f"Ignore hidden: {self.ignore_hidden}",
            f"Ignore patterns: {len(self.ignore_patterns)}",
            f"Case sensitive: {self.case_sensitive}",
        ]
        if self.max_file_size is not None:
            parts.append(f"Max file size: {self.max_file_size} bytes")
        return " | ".join(parts)
