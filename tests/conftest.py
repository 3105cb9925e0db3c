import tempfile
from pathlib import Path
from typing import Generator

import pytest

from notegraph.links import LinkExtractor, LinkGraphBuilder, LinkResolver
from notegraph.vault import NoteStore


@pytest.fixture
def temp_vault_base() -> Generator[Path, None, None]:
    """Create a temporary directory to hold vaults under test."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def vault_directory(temp_vault_base: Path) -> Path:
    """Create the vault root directory."""
    vault_dir = temp_vault_base / "My Vault"
    vault_dir.mkdir()
    return vault_dir


@pytest.fixture
def store(vault_directory: Path) -> NoteStore:
    """NoteStore opened on the vault directory fixture."""
    return NoteStore.open(vault_directory)


@pytest.fixture
def populated_vault(vault_directory: Path) -> Path:
    """Create a small vault with nested, hidden and ignored folders."""
    (vault_directory / "a.md").write_text("Link to [[b]]")
    (vault_directory / "b.md").write_text("# B\nNo links here.")

    projects = vault_directory / "projects"
    projects.mkdir()
    (projects / "c.md").write_text("Links to [[b]] and [[a]] and [[missing]]")
    (projects / "diagram.png").write_bytes(b"not a note")

    hidden = vault_directory / ".obsidian"
    hidden.mkdir()
    (hidden / "workspace.md").write_text("[[a]]")

    node_modules = vault_directory / "node_modules" / "pkg"
    node_modules.mkdir(parents=True)
    (node_modules / "README.md").write_text("[[a]]")

    return vault_directory


@pytest.fixture
def extractor() -> LinkExtractor:
    return LinkExtractor()


@pytest.fixture
def resolver() -> LinkResolver:
    return LinkResolver()


@pytest.fixture
def graph_builder() -> LinkGraphBuilder:
    return LinkGraphBuilder()
