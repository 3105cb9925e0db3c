"""Wikilink extraction, resolution and link graph building."""

from notegraph.links.extractor import LinkExtractor
from notegraph.links.graph_builder import LinkGraphBuilder
from notegraph.links.resolver import LinkResolver

__all__ = [
    "LinkExtractor",
    "LinkGraphBuilder",
    "LinkResolver",
]
