"""Full rebuilds of the link graph and search index from the vault."""

from pathlib import Path

from loguru import logger

from notegraph.domain.links import LinkGraph
from notegraph.links import LinkExtractor, LinkGraphBuilder
from notegraph.search_index.base import SearchIndex
from notegraph.vault import NoteStore


class VaultIndexer:
    """Reads every note in a vault and rebuilds the derived indices."""

    def __init__(
        self,
        *,
        store: NoteStore,
        search_index: SearchIndex | None = None,
        extractor: LinkExtractor | None = None,
    ):
        """Initialize the indexer.

        Args:
            store: Note store for the vault
            search_index: Optional search collaborator to keep in sync
            extractor: Link extractor, a fresh one if not given
        """
        self.store = store
        self.search_index = search_index
        self.graph_builder = LinkGraphBuilder(extractor=extractor)

    def rebuild(self) -> LinkGraph:
        """Rebuild the link graph and search index from the current vault contents.

        Returns:
            The freshly built LinkGraph
        """
        documents = self.store.read_all()
        vault_files = [path for path, _ in documents]
        logger.info(f"Rebuilding link graph for {len(vault_files)} notes in {self.store.config.name}")

        graph = self.graph_builder.build(documents, vault_files)

        if self.search_index is not None:
            self._sync_search_index(documents)

        stats = graph.stats()
        logger.info("Rebuild complete:")
        logger.info(f"  - Documents with links: {stats.num_documents}")
        logger.info(f"  - References: {stats.num_references}")
        logger.info(f"  - Linked targets: {stats.num_resolved_targets}")
        logger.info(f"  - Broken references: {stats.num_broken_references}")

        return graph

    def _sync_search_index(self, documents: list[tuple[Path, str]]) -> None:
        current_paths = {path for path, _ in documents}

        removed = [path for path in self.search_index.indexed_paths() if path not in current_paths]
        if removed:
            logger.info(f"Removing {len(removed)} deleted notes from the search index...")
            for path in removed:
                self.search_index.remove_file(path)

        for path, content in documents:
            self.search_index.index_file(path, content)
