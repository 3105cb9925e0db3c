"""Resolution of wikilink targets to vault files."""

import logging
from collections.abc import Sequence
from pathlib import Path

from notegraph.config import settings

logger = logging.getLogger(__name__)


class LinkResolver:
    """Maps a wikilink target to one of the vault's note files."""

    def __init__(self, note_extension: str | None = None):
        """Initialize resolver.

        Args:
            note_extension: Suffix appended to bare targets (defaults to settings)
        """
        self.note_extension = note_extension or settings.note_extension

    def resolve(self, target: str, vault_files: Sequence[Path]) -> Path | None:
        """Resolve a single target against the known vault files.

        Stem matches win over full filename matches. Within each stage the
        first candidate in ``vault_files`` order wins, so pass a sorted list
        for repeatable results.

        Args:
            target: Target text of a wikilink
            vault_files: Vault-relative note paths

        Returns:
            The matching path, or None if nothing matches
        """
        target_folded = target.casefold()

        # Try stem match first
        for file in vault_files:
            if Path(file).stem.casefold() == target_folded:
                return Path(file)

        # Try with the note extension, appended unless the target already has it verbatim
        filename = target if target.endswith(self.note_extension) else target + self.note_extension
        filename = filename.casefold()
        for file in vault_files:
            if Path(file).name.casefold() == filename:
                return Path(file)

        logger.debug(f"Could not resolve wikilink: {target}")
        return None
