"""Building forward, backward and broken-link indices from note contents."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from notegraph.domain.links import (
    BackwardIndex,
    BrokenLinkReport,
    ForwardIndex,
    LinkGraph,
)

from .extractor import LinkExtractor
from .resolver import LinkResolver

logger = logging.getLogger(__name__)


class LinkGraphBuilder:
    """Builds link indices from notes. Every call recomputes from scratch."""

    def __init__(
        self,
        extractor: LinkExtractor | None = None,
        resolver: LinkResolver | None = None,
    ):
        self.extractor = extractor or LinkExtractor()
        self.resolver = resolver or LinkResolver()

    def build(
        self, documents: Iterable[tuple[Path, str]], vault_files: Sequence[Path]
    ) -> LinkGraph:
        """Build all three indices.

        Args:
            documents: (path, content) pairs to scan for links
            vault_files: Vault-relative note paths that links may resolve to

        Returns:
            LinkGraph with forward, backward and broken indices
        """
        forward = self.build_forward_index(documents)
        return LinkGraph(
            forward=forward,
            backward=self.build_backward_index(forward, vault_files),
            broken=self.find_broken_links(forward, vault_files),
        )

    def build_forward_index(self, documents: Iterable[tuple[Path, str]]) -> ForwardIndex:
        """Extract the references in each document.

        Documents without references are left out.
        """
        forward: ForwardIndex = {}

        for path, content in documents:
            references = self.extractor.extract(content)
            if references:
                forward[Path(path)] = references

        return forward

    def build_backward_index(
        self, forward_index: ForwardIndex, vault_files: Sequence[Path]
    ) -> BackwardIndex:
        """Invert the forward index into resolved target -> linking sources.

        Args:
            forward_index: Output of build_forward_index
            vault_files: Vault-relative note paths to resolve against

        Returns:
            Mapping whose source lists are sorted and free of duplicates
        """
        backward: BackwardIndex = {}

        for source, references in forward_index.items():
            for reference in references:
                target = self.resolver.resolve(reference.target, vault_files)
                if target is not None:
                    backward.setdefault(target, []).append(source)

        # Same source may link to the same target more than once
        for target, sources in backward.items():
            backward[target] = sorted(set(sources))

        return backward

    def find_broken_links(
        self, forward_index: ForwardIndex, vault_files: Sequence[Path]
    ) -> BrokenLinkReport:
        """Collect the targets that do not resolve, per source, in order."""
        broken: BrokenLinkReport = {}

        for source, references in forward_index.items():
            broken_targets = [
                reference.target
                for reference in references
                if self.resolver.resolve(reference.target, vault_files) is None
            ]
            if broken_targets:
                logger.warning(f"{source} has {len(broken_targets)} broken link(s)")
                broken[source] = broken_targets

        return broken

    @staticmethod
    def get_backlinks(path: Path, backward_index: BackwardIndex) -> list[Path]:
        """Get all sources linking to ``path``."""
        return list(backward_index.get(Path(path), []))
