"""Tests for full vault rebuilds using fakes and fixtures."""

from pathlib import Path

import pytest

from notegraph.indexer import VaultIndexer
from notegraph.search_index import LocalSearchIndex
from notegraph.vault import NoteStore
from tests.fakes import FakeSearchIndex


@pytest.fixture
def indexer_with_fakes(populated_vault: Path) -> VaultIndexer:
    """Create an indexer over the populated vault with a fake search index."""
    return VaultIndexer(
        store=NoteStore.open(populated_vault),
        search_index=FakeSearchIndex({Path("stale.md"): "old"}),
    )


def test_rebuild_builds_link_graph(indexer_with_fakes: VaultIndexer) -> None:
    graph = indexer_with_fakes.rebuild()

    assert set(graph.forward) == {Path("a.md"), Path("projects/c.md")}
    assert graph.backlinks_for(Path("b.md")) == [Path("a.md"), Path("projects/c.md")]
    assert graph.backlinks_for(Path("a.md")) == [Path("projects/c.md")]
    assert graph.broken == {Path("projects/c.md"): ["missing"]}


def test_rebuild_ignores_hidden_and_node_modules(indexer_with_fakes: VaultIndexer) -> None:
    graph = indexer_with_fakes.rebuild()

    assert all(not str(path).startswith((".obsidian", "node_modules")) for path in graph.forward)


def test_rebuild_syncs_search_index(indexer_with_fakes: VaultIndexer) -> None:
    indexer_with_fakes.rebuild()
    search_index = indexer_with_fakes.search_index

    assert isinstance(search_index, FakeSearchIndex)
    assert search_index.removed == [Path("stale.md")]
    assert sorted(search_index.indexed_paths()) == [
        Path("a.md"),
        Path("b.md"),
        Path("projects/c.md"),
    ]


def test_rebuild_after_mutations(populated_vault: Path) -> None:
    store = NoteStore.open(populated_vault)
    indexer = VaultIndexer(store=store)

    store.write_note("missing.md", "Now it exists, see [[a]]")
    store.delete_note("a.md")
    graph = indexer.rebuild()

    assert graph.broken == {Path("missing.md"): ["a"], Path("projects/c.md"): ["a"]}
    assert graph.backlinks_for(Path("missing.md")) == [Path("projects/c.md")]
    assert graph.backlinks_for(Path("b.md")) == [Path("projects/c.md")]


def test_rebuild_with_local_search_index(populated_vault: Path) -> None:
    indexer = VaultIndexer(store=NoteStore.open(populated_vault), search_index=LocalSearchIndex())

    indexer.rebuild()
    results = indexer.search_index.search("links")

    assert [result.path for result in results] == [Path("projects/c.md")]


def test_rebuild_without_search_index(store: NoteStore) -> None:
    graph = VaultIndexer(store=store).rebuild()

    assert graph.forward == {}
    assert graph.backward == {}
    assert graph.broken == {}
