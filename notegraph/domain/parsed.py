"""Rendering handoff models."""

from pydantic import BaseModel


class Heading(BaseModel):
    level: int
    text: str
    id: str


class CodeBlock(BaseModel):
    language: str | None = None
    code: str


class ParsedMarkdown(BaseModel):
    """A rendered note together with its structural metadata.

    Attributes:
        raw: Original Markdown content
        html: Rendered HTML
        headings: Headings in document order
        code_blocks: Fenced code blocks in document order
    """

    raw: str
    html: str
    headings: list[Heading] = []
    code_blocks: list[CodeBlock] = []
