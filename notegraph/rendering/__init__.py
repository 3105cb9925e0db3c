from notegraph.rendering.markdown_parser import MarkdownParser

__all__ = ["MarkdownParser"]
