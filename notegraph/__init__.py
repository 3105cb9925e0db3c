"""Link graph engine for a vault of Markdown notes."""

from notegraph.errors import NoteGraphError
from notegraph.links import LinkExtractor, LinkGraphBuilder, LinkResolver
from notegraph.vault import NoteStore

__all__ = [
    "LinkExtractor",
    "LinkGraphBuilder",
    "LinkResolver",
    "NoteGraphError",
    "NoteStore",
]
