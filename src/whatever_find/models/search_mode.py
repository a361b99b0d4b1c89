"""
Search mode selector for whatever-find.

A SearchMode only names a matching strategy; it carries no data. Compiled
patterns live in the matcher built for a single search call.
"""

from enum import Enum


class SearchMode(Enum):
    """Enumeration of the supported filename matching strategies."""
    SUBSTRING = "substring"
    GLOB = "glob"
    REGEX = "regex"
    FUZZY = "fuzzy"

    @classmethod
    def from_string(cls, value: str) -> 'SearchMode':
        """Look up a mode by its name, ignoring case and surrounding whitespace."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Invalid search mode: {value}. Must be one of: {valid}")

    def is_exact(self) -> bool:
        """Exact modes return plain path lists; fuzzy mode returns scores."""
        return self is not SearchMode.FUZZY

    def __str__(self) -> str:
        return self.value
