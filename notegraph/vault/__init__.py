"""File-backed note storage."""

from notegraph.vault.cache import NoteCache
from notegraph.vault.store import NoteStore

__all__ = [
    "NoteCache",
    "NoteStore",
]
