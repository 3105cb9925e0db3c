"""Vault and document domain models."""

from pathlib import Path, PurePath

from pydantic import BaseModel, field_validator


def is_vault_relative(path: PurePath) -> bool:
    """Return True if ``path`` is relative and never climbs above the vault root."""
    if path.is_absolute() or path.anchor:
        return False

    depth = 0
    for part in path.parts:
        if part == "..":
            depth -= 1
            if depth < 0:
                return False
        elif part not in ("", "."):
            depth += 1
    return True


class VaultConfig(BaseModel):
    """Configuration for a vault.

    Attributes:
        root_path: Root directory of the vault
        name: Display name of the vault
        watch_enabled: Whether the host should watch the vault for changes
    """

    root_path: Path
    name: str
    watch_enabled: bool = False


class Document(BaseModel):
    """A Markdown note as read from, or written to, the vault.

    Attributes:
        path: Path relative to the vault root
        content: Full Markdown content
        metadata: Frontmatter metadata (not parsed yet, always empty)
        modified_at: Last modification time in seconds since epoch, if known
    """

    path: Path
    content: str
    metadata: dict[str, str] = {}
    modified_at: int | None = None

    @field_validator("path")
    @classmethod
    def check_relative(cls, value: Path) -> Path:
        if not is_vault_relative(value):
            raise ValueError(f"document path must be relative to the vault root: {value}")
        return value
