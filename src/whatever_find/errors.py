"""
Exception hierarchy for whatever-find.

Every error raised by the package derives from FileSearchError, so callers
can catch a single type at their outer boundary. Each class carries the
process exit code the command-line interface uses for it.
"""

from typing import Optional


class FileSearchError(Exception):
    """Base exception for all whatever-find errors."""

    exit_code: int = 1

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "File search failed")


class PatternSyntaxError(FileSearchError):
    """
    Raised when a query is not a well-formed glob or regex pattern.

    The error is raised while compiling the pattern, before any index entry
    is examined, so a search never applies a pattern partially.

    Attributes:
        pattern: The query text exactly as supplied by the caller
        mode: Name of the search mode the pattern was compiled for
        reason: Diagnostic reported by the pattern compiler
    """

    exit_code = 2

    def __init__(self, pattern: str, mode: str, reason: str):
        self.pattern = pattern
        self.mode = mode
        self.reason = reason
        super().__init__(f"Invalid {mode} pattern '{pattern}': {reason}")


class InvalidPathError(FileSearchError):
    """Raised when a search root is missing or is not a directory."""

    exit_code = 3

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path '{path}': {reason}")


class ConfigurationError(FileSearchError):
    """Raised when configuration parsing or validation fails."""

    exit_code = 4
