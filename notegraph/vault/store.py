"""Vault storage: listing, reading and writing Markdown notes on disk."""

import os
from pathlib import Path

from loguru import logger

from notegraph.config import settings
from notegraph.domain.document import Document, VaultConfig, is_vault_relative
from notegraph.errors import NoteNotFoundError, VaultError, VaultIOError

from .cache import NoteCache


class NoteStore:
    """Owns a vault directory and a cache of recently accessed notes."""

    def __init__(self, config: VaultConfig, note_extension: str | None = None):
        """
        Initialize NoteStore.

        Args:
            config: Vault configuration. The root path is checked once, here.
            note_extension: File suffix that marks a note (defaults to settings)

        Raises:
            VaultError: If the root path does not exist
        """
        if not config.root_path.exists():
            raise VaultError(f"Vault path does not exist: {config.root_path}")

        self._config = config
        self.note_extension = note_extension or settings.note_extension
        self.ignored_directories = set(settings.ignored_directories)
        self.cache = NoteCache()

    @classmethod
    def open(cls, root_path: str | Path) -> "NoteStore":
        """Open an existing vault, naming it after its directory."""
        root_path = Path(root_path)
        name = root_path.name
        if name in ("", ".."):
            name = settings.default_vault_name
        config = VaultConfig(
            root_path=root_path,
            name=name,
            watch_enabled=settings.watch_enabled,
        )
        return cls(config)

    @property
    def config(self) -> VaultConfig:
        return self._config

    @property
    def root(self) -> Path:
        return self._config.root_path

    def list_files(self) -> list[Path]:
        """List every note in the vault, relative to the root.

        Hidden directories and ignored directories (node_modules) are not
        descended into. Order follows the filesystem; sort it if you need
        determinism.
        """
        files = []

        def on_error(error: OSError) -> None:
            raise VaultIOError(f"{error.filename}: {error.strerror}") from error

        for dirpath, dirnames, filenames in os.walk(self.root, onerror=on_error):
            dirnames[:] = [name for name in dirnames if not self._is_pruned(name)]
            for filename in filenames:
                if Path(filename).suffix == self.note_extension:
                    files.append(Path(dirpath, filename).relative_to(self.root))

        logger.debug(f"Listed {len(files)} notes in {self.root}")
        return files

    def read_note(self, path: str | Path) -> Document:
        """Read a note from disk and refresh its cache entry.

        Raises:
            NoteNotFoundError: If there is no file at ``path``
            VaultIOError: If the file cannot be read or decoded
        """
        relative = self._relative(path)
        full_path = self.root / relative

        if not full_path.exists():
            raise NoteNotFoundError(str(relative))

        try:
            with open(full_path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise VaultIOError(f"{relative}: {e}") from e

        document = Document(
            path=relative,
            content=content,
            metadata={},  # TODO: parse YAML frontmatter into metadata
            modified_at=self._modified_at(full_path),
        )
        logger.debug(f"Read {relative}")
        return self.cache.put(document)

    def write_note(self, path: str | Path, content: str) -> None:
        """Write a note to disk, creating parent directories as needed."""
        relative = self._relative(path)
        full_path = self.root / relative

        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            with open(full_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise VaultIOError(f"{relative}: {e}") from e

        # Not re-stat'ed after writing
        self.cache.put(Document(path=relative, content=content, metadata={}, modified_at=None))
        logger.debug(f"Wrote {relative}")

    def delete_note(self, path: str | Path) -> None:
        """Delete a note from disk and drop it from the cache."""
        relative = self._relative(path)
        self.cache.evict(relative)

        try:
            (self.root / relative).unlink()
        except OSError as e:
            raise VaultIOError(f"{relative}: {e}") from e

        logger.info(f"Deleted {relative}")

    def rename_note(self, old_path: str | Path, new_path: str | Path) -> None:
        """Move a note, carrying over its cache entry only if it had one."""
        old_relative = self._relative(old_path)
        new_relative = self._relative(new_path)
        new_full = self.root / new_relative

        try:
            new_full.parent.mkdir(parents=True, exist_ok=True)
            (self.root / old_relative).replace(new_full)
        except OSError as e:
            raise VaultIOError(f"{old_relative} -> {new_relative}: {e}") from e

        if not self.cache.move(old_relative, new_relative):
            # Whatever was cached under the new path no longer matches the disk
            self.cache.evict(new_relative)

        logger.info(f"Renamed {old_relative} -> {new_relative}")

    def cached(self, path: str | Path) -> Document | None:
        """Get a cached note without touching the disk."""
        return self.cache.get(self._relative(path))

    def read_all(self) -> list[tuple[Path, str]]:
        """Read every note in the vault.

        Returns:
            (path, content) pairs sorted by path
        """
        return [(path, self.read_note(path).content) for path in sorted(self.list_files())]

    def _is_pruned(self, dirname: str) -> bool:
        return dirname.startswith(".") or dirname in self.ignored_directories

    def _relative(self, path: str | Path) -> Path:
        """Validate a vault-relative path and collapse '.' and '..' segments.

        Every spelling of the same file maps to one cache key.
        """
        relative = Path(path)
        if not is_vault_relative(relative):
            raise VaultError(f"Path escapes the vault root: {path}")
        return Path(os.path.normpath(relative))

    @staticmethod
    def _modified_at(full_path: Path) -> int | None:
        try:
            return int(full_path.stat().st_mtime)
        except OSError:
            return None
