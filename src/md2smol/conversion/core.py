from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Tuple

from ..models import Document, check_structure
from ..options import RenderOptions


FRONTMATTER_PATTERN = re.compile(r"^---\s*$")


class Parser(Protocol):
    def parse(self, source: str) -> Document:
        ...


class Renderer(Protocol):
    def render(self, document: Document) -> str:
        ...


class ParserFactory(Protocol):
    def __call__(self, **kwargs: Any) -> Parser:
        ...


class RendererFactory(Protocol):
    def __call__(self, *, options: RenderOptions, **kwargs: Any) -> Renderer:
        ...


def parse_frontmatter(lines: List[str]) -> Tuple[Dict[str, str], List[str]]:
    """Split a leading ``---`` delimited ``key: value`` block from ``lines``.

    An unterminated block is treated as ordinary content.
    """
    if not lines or not FRONTMATTER_PATTERN.match(lines[0]):
        return {}, lines
    frontmatter: Dict[str, str] = {}
    idx = 1
    while idx < len(lines):
        if FRONTMATTER_PATTERN.match(lines[idx]):
            break
        if ":" in lines[idx]:
            key, value = lines[idx].split(":", 1)
            frontmatter[key.strip()] = value.strip()
        idx += 1
    if idx >= len(lines):
        return {}, lines
    remaining = lines[idx + 1 :] if idx + 1 < len(lines) else []
    return frontmatter, remaining


def read_lines(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as handle:
        return handle.readlines()


def run_pipeline(document: Document, *, renderer: Renderer) -> str:
    check_structure(document)
    return renderer.render(document)


def run_conversion(
    source: str,
    *,
    options: RenderOptions,
    parser_factory: ParserFactory,
    renderer_factory: RendererFactory,
    parser_options: Optional[Dict[str, Any]] = None,
) -> str:
    parser = parser_factory(**(parser_options or {}))
    renderer = renderer_factory(options=options.validate())
    return run_pipeline(parser.parse(source), renderer=renderer)
