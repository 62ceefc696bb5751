"""
Search Result Types

Data types handed to the booster by the retrieval layer.

A Chunk is a retrieved unit of source text and is read-only here.
A SearchResult pairs a chunk with its relevance score; the booster
overwrites the score in place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Chunk:
    """A retrieved unit of source text with the file it came from."""

    file_path: str
    id: str = ""
    start_line: int = 0
    end_line: int = 0
    content: str = ""
    hash: str = ""
    updated_at: Optional[datetime] = None


@dataclass
class SearchResult:
    """A scored search hit."""

    chunk: Chunk
    score: float

    @property
    def file_path(self) -> str:
        return self.chunk.file_path
