from notegraph.search_index.base import SearchIndex
from notegraph.search_index.local import LocalSearchIndex

__all__ = ["LocalSearchIndex", "SearchIndex"]
