"""Tests for LocalSearchIndex functionality."""

from pathlib import Path

import pytest

from notegraph.domain.search import IndexStats
from notegraph.search_index import LocalSearchIndex


@pytest.fixture
def search_index() -> LocalSearchIndex:
    index = LocalSearchIndex()
    index.index_file(Path("garden.md"), "Tomatoes and basil grow well in the garden.")
    index.index_file(Path("kitchen.md"), "Basil pesto needs basil, garlic and olive oil.")
    index.index_file(Path("work.md"), "Quarterly planning meeting notes.")
    return index


def test_empty_index() -> None:
    index = LocalSearchIndex()

    assert index.search("anything") == []
    assert index.stats() == IndexStats(num_files=0, num_terms=0)


def test_index_file(search_index: LocalSearchIndex) -> None:
    stats = search_index.stats()

    assert stats.num_files == 3
    assert stats.num_terms > 0
    assert sorted(search_index.indexed_paths()) == [
        Path("garden.md"),
        Path("kitchen.md"),
        Path("work.md"),
    ]


def test_remove_file(search_index: LocalSearchIndex) -> None:
    search_index.remove_file(Path("work.md"))
    search_index.remove_file(Path("never-indexed.md"))

    assert search_index.stats().num_files == 2
    assert search_index.search("planning") == []


def test_search_ranks_by_relevance(search_index: LocalSearchIndex) -> None:
    results = search_index.search("basil")

    assert [result.path for result in results] == [Path("kitchen.md"), Path("garden.md")]
    assert results[0].score > results[1].score > 0
    assert "basil" in results[1].snippet.lower()


def test_search_respects_limit(search_index: LocalSearchIndex) -> None:
    assert len(search_index.search("basil", limit=1)) == 1


def test_blank_query_returns_nothing(search_index: LocalSearchIndex) -> None:
    assert search_index.search("   ") == []


def test_reindexing_replaces_content(search_index: LocalSearchIndex) -> None:
    search_index.index_file(Path("work.md"), "Now about basil too")

    assert search_index.stats().num_files == 3
    assert Path("work.md") in [result.path for result in search_index.search("basil")]
    assert search_index.search("quarterly") == []


def test_snippet_is_bounded() -> None:
    index = LocalSearchIndex(snippet_chars=20)
    index.index_file(Path("long.md"), "filler " * 50 + "needle " + "filler " * 50)

    result = index.search("needle")[0]

    assert "needle" in result.snippet
    assert len(result.snippet) <= 20


def test_zero_snippet_length_is_respected() -> None:
    index = LocalSearchIndex(snippet_chars=0)
    index.index_file(Path("note.md"), "a needle in a haystack")

    result = index.search("needle")[0]

    assert index.snippet_chars == 0
    assert result.snippet == ""
