from pathlib import Path
from typing import List, Protocol

from notegraph.domain.search import IndexStats, SearchResult


class SearchIndex(Protocol):
    """Protocol for full-text search collaborators fed by the vault indexer."""

    def index_file(self, path: Path, content: str) -> None:
        """Add or replace a note in the index."""
        ...

    def remove_file(self, path: Path) -> None:
        """Remove a note from the index."""
        ...

    def indexed_paths(self) -> List[Path]:
        """Get the paths of all indexed notes."""
        ...

    def search(self, query: str, limit: int = 10) -> List[SearchResult]:
        """Get the notes most relevant to a query."""
        ...

    def stats(self) -> IndexStats:
        """Get statistics about the index."""
        ...
