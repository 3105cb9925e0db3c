"""Extraction of [[wikilink]] references from note text."""

import re

from notegraph.domain.links import Reference


class LinkExtractor:
    """Finds [[target]] and [[target|display]] references in Markdown content."""

    def __init__(self) -> None:
        # Target excludes ']' and '|', display excludes ']'. Nested or escaped
        # brackets are not supported and simply fail to match.
        self.wikilink_pattern = re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]")

    def extract(self, content: str) -> list[Reference]:
        """Extract all wikilinks from markdown content.

        Args:
            content: Raw note text

        Returns:
            References in order of occurrence, with UTF-8 byte offsets
        """
        references = []
        char_pos = 0
        byte_pos = 0

        for match in self.wikilink_pattern.finditer(content):
            byte_pos += len(content[char_pos : match.start()].encode("utf-8"))
            char_pos = match.start()

            display = match.group(2)
            references.append(
                Reference(
                    target=match.group(1).strip(),
                    display=display.strip() if display is not None else None,
                    offset=byte_pos,
                )
            )

        return references
