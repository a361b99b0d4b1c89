"""
Index and result models for whatever-find.

FileIndex is what the indexer produces and the matching engine consumes.
SearchResults packages one search over one directory tree for callers that
want more than a bare path list: the mode used, per-path scores and timing.
"""

from typing import Dict, List, Optional, Any, Tuple
from datetime import datetime
from pathlib import PurePath
from pydantic import BaseModel, Field, field_validator

from .search_mode import SearchMode


# Normalized filename -> full paths of every file carrying that name
FileIndex = Dict[str, List[str]]

# (path, score) pair produced by fuzzy matching
ScoredPath = Tuple[str, float]


class FileMatch(BaseModel):
    """
    One path returned by a search.

    Attributes:
        path: Full path as stored in the index
        score: 1.0 for exact modes, the fuzzy score otherwise
        rank: 1-based position in the owning SearchResults
    """

    path: str = Field(..., min_length=1, description="Full path as stored in the index")
    score: float = Field(1.0, ge=0.0, le=1.0, description="Match score")
    rank: Optional[int] = Field(None, ge=1, description="Position in the result list")

    @property
    def filename(self) -> str:
        return PurePath(self.path).name

    @property
    def directory(self) -> str:
        return str(PurePath(self.path).parent)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'filename': self.filename,
            'directory': self.directory,
            'score': self.score,
            'rank': self.rank,
        }

    def __str__(self) -> str:
        return f"{self.path} (score: {self.score:.2f})"


class SearchResults(BaseModel):
    """
    Outcome of one search over one directory tree.

    Matches keep engine order: sorted by path for exact modes, by
    descending score (then path) for fuzzy mode. Ranks are renumbered
    whenever the match list is truncated.

    Attributes:
        query: Query text as supplied by the caller
        root: Directory tree that was indexed
        mode: Mode that produced the matches
        auto_detected: True when the mode was inferred from the query
        matches: Matched paths in engine order
        total_indexed: Number of paths in the searched index
        execution_time: Seconds spent indexing and matching
        timestamp: Time the search started
    """

    query: str = Field(..., description="Query text")
    root: str = Field(..., description="Directory tree that was indexed")
    mode: SearchMode = Field(..., description="Mode that produced the matches")
    auto_detected: bool = Field(True, description="Whether the mode was inferred")
    matches: List[FileMatch] = Field(default_factory=list, description="Matched paths in engine order")
    total_indexed: int = Field(0, ge=0, description="Number of paths in the searched index")
    execution_time: float = Field(0.0, ge=0.0, description="Seconds spent indexing and matching")
    timestamp: datetime = Field(default_factory=datetime.now, description="Time the search started")

    @field_validator('mode', mode='before')
    @classmethod
    def validate_mode(cls, v) -> SearchMode:
        """Accept mode names as well as SearchMode members."""
        return SearchMode.from_string(v) if isinstance(v, str) else v

    def model_post_init(self, __context) -> None:
        self._renumber()

    def _renumber(self) -> None:
        for position, match in enumerate(self.matches, start=1):
            match.rank = position

    @classmethod
    def from_paths(cls, query: str, root: str, mode: SearchMode, paths: List[str],
                   **kwargs) -> 'SearchResults':
        """Wrap the path list returned by an exact-mode search."""
        return cls(query=query, root=root, mode=mode,
                   matches=[FileMatch(path=path) for path in paths], **kwargs)

    @classmethod
    def from_scored(cls, query: str, root: str, scored: List[ScoredPath],
                    **kwargs) -> 'SearchResults':
        """Wrap the (path, score) list returned by a fuzzy search."""
        return cls(query=query, root=root, mode=SearchMode.FUZZY,
                   matches=[FileMatch(path=path, score=score) for path, score in scored], **kwargs)

    def get_match_count(self) -> int:
        return len(self.matches)

    def get_paths(self) -> List[str]:
        """Matched paths in result order."""
        return [match.path for match in self.matches]

    def get_top_matches(self, n: int = 10) -> List[FileMatch]:
        """The first ``n`` matches; for fuzzy results these are the best scored."""
        return self.matches[:n]

    def limit_results(self, max_results: int) -> None:
        """
        Drop matches beyond ``max_results`` in place.

        A non-positive limit keeps every match.
        """
        if max_results <= 0:
            return
        del self.matches[max_results:]
        self._renumber()

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view: mode by name, timestamp in ISO 8601."""
        return {
            'query': self.query,
            'root': self.root,
            'mode': self.mode.value,
            'auto_detected': self.auto_detected,
            'match_count': self.get_match_count(),
            'matches': [match.to_dict() for match in self.matches],
            'total_indexed': self.total_indexed,
            'execution_time': self.execution_time,
            'timestamp': self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        detection = " (auto)" if self.auto_detected else ""
        return (f"Found {self.get_match_count()} matches | Mode: {self.mode.value}{detection}"
                f" | Indexed {self.total_indexed} files | Took {self.execution_time:.2f}s")
