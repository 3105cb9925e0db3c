import re
from collections import Counter
from pathlib import Path
from typing import Dict, List

import numpy as np

from notegraph.config import settings
from notegraph.domain.search import IndexStats, SearchResult
from notegraph.search_index.base import SearchIndex

TOKEN_PATTERN = re.compile(r"\w+")


def tokenize(text: str) -> List[str]:
    return TOKEN_PATTERN.findall(text.lower())


class LocalSearchIndex(SearchIndex):
    """In-memory index scoring notes by cosine similarity of term counts."""

    def __init__(self, snippet_chars: int | None = None) -> None:
        self.snippet_chars = settings.snippet_chars if snippet_chars is None else snippet_chars
        self._contents: Dict[Path, str] = {}
        self._term_counts: Dict[Path, Counter[str]] = {}

    def index_file(self, path: Path, content: str) -> None:
        path = Path(path)
        self._contents[path] = content
        self._term_counts[path] = Counter(tokenize(content))

    def remove_file(self, path: Path) -> None:
        path = Path(path)
        self._contents.pop(path, None)
        self._term_counts.pop(path, None)

    def indexed_paths(self) -> List[Path]:
        return list(self._contents)

    def search(self, query: str, limit: int = 10) -> List[SearchResult]:
        """Get the indexed notes closest to the query, best first."""
        query_counts = Counter(tokenize(query))
        if not query_counts or not self._term_counts:
            return []

        vocabulary = sorted(set(query_counts).union(*self._term_counts.values()))
        positions = {term: i for i, term in enumerate(vocabulary)}
        query_vector = self._to_vector(query_counts, positions)

        scored = []
        for path, counts in self._term_counts.items():
            note_vector = self._to_vector(counts, positions)
            norm = np.linalg.norm(query_vector) * np.linalg.norm(note_vector)
            if norm == 0:
                continue
            similarity = float(np.dot(query_vector, note_vector) / norm)
            if similarity > 0:
                scored.append((similarity, path))

        scored.sort(key=lambda x: (-x[0], x[1]))
        return [
            SearchResult(
                path=path,
                score=score,
                snippet=self._snippet(self._contents[path], query_counts),
            )
            for score, path in scored[:limit]
        ]

    def stats(self) -> IndexStats:
        terms: set[str] = set()
        for counts in self._term_counts.values():
            terms.update(counts)
        return IndexStats(num_files=len(self._contents), num_terms=len(terms))

    @staticmethod
    def _to_vector(counts: Counter[str], positions: Dict[str, int]) -> np.ndarray:
        vector = np.zeros(len(positions), dtype=np.float32)
        for term, count in counts.items():
            vector[positions[term]] = count
        return vector

    def _snippet(self, content: str, query_counts: Counter[str]) -> str:
        """Cut an excerpt centred on the first query term found in the content."""
        lowered = content.lower()
        hits = []
        for term in query_counts:
            match = re.search(rf"\b{re.escape(term)}\b", lowered)
            if match:
                hits.append(match.start())
        center = min(hits) if hits else 0

        start = max(0, center - self.snippet_chars // 2)
        end = min(len(content), start + self.snippet_chars)
        return re.sub(r"\s+", " ", content[start:end]).strip()
