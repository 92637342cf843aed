"""Adapters from external markup parsers into the document model."""

from .markdown import MarkdownParser, from_tokens, parse_markdown

__all__ = ["MarkdownParser", "from_tokens", "parse_markdown"]
