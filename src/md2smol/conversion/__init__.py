"""Conversion pipeline helpers."""

from .core import (
    Parser,
    ParserFactory,
    Renderer,
    RendererFactory,
    parse_frontmatter,
    read_lines,
    run_conversion,
    run_pipeline,
)

__all__ = [
    "Parser",
    "ParserFactory",
    "Renderer",
    "RendererFactory",
    "parse_frontmatter",
    "read_lines",
    "run_conversion",
    "run_pipeline",
]
