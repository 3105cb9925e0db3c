"""In-memory document cache owned by a single NoteStore."""

from pathlib import Path

from notegraph.domain.document import Document


class NoteCache:
    """Documents keyed by vault-relative path.

    Entries only change through explicit put, evict and move calls; there is
    no size limit or expiry.
    """

    def __init__(self) -> None:
        self._documents: dict[Path, Document] = {}

    def get(self, path: Path) -> Document | None:
        return self._documents.get(path)

    def put(self, document: Document) -> Document:
        """Store ``document``, replacing any entry for the same path."""
        self._documents[document.path] = document
        return document

    def evict(self, path: Path) -> Document | None:
        return self._documents.pop(path, None)

    def move(self, old_path: Path, new_path: Path) -> bool:
        """Re-key the entry for ``old_path`` under ``new_path``.

        Returns:
            True if an entry was moved, False if ``old_path`` was not cached
        """
        document = self._documents.pop(old_path, None)
        if document is None:
            return False
        self._documents[new_path] = document.model_copy(update={"path": new_path})
        return True

    def paths(self) -> list[Path]:
        return list(self._documents)

    def __contains__(self, path: object) -> bool:
        return path in self._documents

    def __len__(self) -> int:
        return len(self._documents)
