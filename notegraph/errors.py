"""Exception types raised by the vault and link graph layers."""


class NoteGraphError(Exception):
    """Base class for all notegraph errors."""

    prefix = "Error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class VaultError(NoteGraphError):
    """A vault-level invariant was violated, e.g. a missing root directory."""

    prefix = "Vault error"


class NoteNotFoundError(NoteGraphError):
    """A note path has no backing file."""

    prefix = "File not found"


class VaultIOError(NoteGraphError):
    """An underlying filesystem operation failed."""

    prefix = "IO error"


class ParseError(NoteGraphError):
    prefix = "Parse error"


class InvalidReferenceError(NoteGraphError):
    prefix = "Invalid wikilink"


class SerializationError(NoteGraphError):
    """Encoding or decoding a record failed."""

    prefix = "Serialization error"


class SearchIndexError(NoteGraphError):
    prefix = "Index error"


class UnknownError(NoteGraphError):
    prefix = "Unknown error"
