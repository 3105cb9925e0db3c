"""Markdown rendering handoff for the host layer."""

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from notegraph.domain.parsed import CodeBlock, Heading, ParsedMarkdown

FENCE = "```"


def split_lines(markdown: str) -> list[str]:
    r"""Split on "\n" only, dropping a trailing "\r" from each line and the empty
    line after a final newline."""
    lines = markdown.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class MarkdownParser:
    """Renders notes to HTML with markdown-it-py and extracts their outline."""

    def __init__(self) -> None:
        # Raw HTML stays escaped
        self.md = (
            MarkdownIt("commonmark", {"html": False, "linkify": True})
            .enable(["table", "strikethrough", "linkify"])
            .use(footnote_plugin)
            .use(tasklists_plugin)
        )

    def to_html(self, markdown: str) -> str:
        return self.md.render(markdown)

    def parse(self, markdown: str) -> ParsedMarkdown:
        """Render markdown and extract its headings and fenced code blocks."""
        return ParsedMarkdown(
            raw=markdown,
            html=self.to_html(markdown),
            headings=self.extract_headings(markdown),
            code_blocks=self.extract_code_blocks(markdown),
        )

    @staticmethod
    def extract_headings(markdown: str) -> list[Heading]:
        """Extract ATX headings, numbering their ids in document order.

        The level is the length of the leading '#' run; runs longer than six
        are not headings.
        """
        headings = []

        for line in split_lines(markdown):
            stripped = line.strip()
            if not stripped.startswith("#"):
                continue

            level = len(stripped) - len(stripped.lstrip("#"))
            if level > 6:
                continue

            headings.append(
                Heading(
                    level=level,
                    text=stripped.lstrip("#").strip(),
                    id=f"heading-{len(headings)}",
                )
            )

        return headings

    @staticmethod
    def extract_code_blocks(markdown: str) -> list[CodeBlock]:
        """Extract fenced code blocks. A fence left open at the end is dropped."""
        code_blocks = []
        in_code_block = False
        language = None
        lines: list[str] = []

        for line in split_lines(markdown):
            opener = line.lstrip()
            if opener.startswith(FENCE):
                if in_code_block:
                    code_blocks.append(CodeBlock(language=language, code="".join(lines)))
                    lines = []
                    in_code_block = False
                else:
                    language = opener[len(FENCE) :].strip() or None
                    in_code_block = True
            elif in_code_block:
                lines.append(line + "\n")

        return code_blocks
