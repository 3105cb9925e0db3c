"""Search handoff models."""

from pathlib import Path

from pydantic import BaseModel


class SearchResult(BaseModel):
    """A single search hit.

    Attributes:
        path: Vault-relative path of the matching note
        score: Relevance score, higher is better
        snippet: Excerpt around the first matching term
    """

    path: Path
    score: float
    snippet: str


class IndexStats(BaseModel):
    """Statistics about a search index."""

    num_files: int
    num_terms: int
