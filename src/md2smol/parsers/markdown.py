"""Map mistune's AST into the md2smol document model.

mistune is the only place that knows Markdown syntax. Everything after
``from_tokens`` works on :mod:`md2smol.models` nodes alone.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

import mistune

from ..errors import StructuralError
from ..models import (
    MAX_DEPTH,
    Block,
    Blockquote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Inline,
    LineBreak,
    Link,
    List as ListBlock,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from ..plugins import register_parser
from ..utils.logger import get_logger


logger = get_logger(__name__)

Token = Dict[str, Any]

# Raw HTML is not passed through to any target.
_DROPPED_TYPES = {"blank_line", "block_html", "inline_html"}


def _attrs(token: Token) -> Dict[str, Any]:
    return token.get("attrs") or {}


def _check_depth(depth: int) -> None:
    if depth > MAX_DEPTH:
        raise StructuralError(f"Document nesting exceeds the maximum depth of {MAX_DEPTH}.")


def _convert_inlines(tokens: Iterable[Token], depth: int) -> Tuple[Inline, ...]:
    _check_depth(depth)
    nodes: List[Inline] = []
    for token in tokens:
        kind = token.get("type")
        if kind == "text":
            nodes.append(Text(token.get("raw", "")))
        elif kind == "softbreak":
            nodes.append(Text(" "))
        elif kind == "linebreak":
            nodes.append(LineBreak())
        elif kind == "codespan":
            nodes.append(Code(token.get("raw", "")))
        elif kind == "emphasis":
            nodes.append(Emphasis(_convert_inlines(token.get("children", ()), depth + 1)))
        elif kind == "strong":
            nodes.append(Strong(_convert_inlines(token.get("children", ()), depth + 1)))
        elif kind in {"link", "image"}:
            href = str(_attrs(token).get("url", ""))
            nodes.append(Link(href, _convert_inlines(token.get("children", ()), depth + 1)))
        elif kind in _DROPPED_TYPES:
            continue
        elif "children" in token:
            # strikethrough and other formatting plugins: keep the text only.
            nodes.extend(_convert_inlines(token["children"], depth + 1))
        elif "raw" in token:
            nodes.append(Text(token["raw"]))
    return tuple(nodes)


def _convert_blocks(tokens: Iterable[Token], depth: int) -> Tuple[Block, ...]:
    _check_depth(depth)
    blocks: List[Block] = []
    for token in tokens:
        block = _convert_block(token, depth)
        if block is None:
            continue
        if isinstance(block, tuple):
            blocks.extend(block)
        else:
            blocks.append(block)
    return tuple(blocks)


def _convert_block(token: Token, depth: int) -> Optional[Any]:
    kind = token.get("type")
    children = token.get("children", ())
    if kind == "heading":
        level = int(_attrs(token).get("level", 1))
        return Heading(max(1, min(6, level)), _convert_inlines(children, depth + 1))
    if kind in {"paragraph", "block_text"}:
        return Paragraph(_convert_inlines(children, depth + 1))
    if kind == "list":
        attrs = _attrs(token)
        ordered = bool(attrs.get("ordered", False))
        start = int(attrs.get("start", 1) or 1)
        items = tuple(_convert_blocks(item.get("children", ()), depth + 2) for item in children)
        return ListBlock(ordered=ordered, items=items, start=start)
    if kind == "block_code":
        info = str(_attrs(token).get("info") or "").strip()
        language = info.split()[0] if info else None
        return CodeBlock(token.get("raw", ""), language)
    if kind == "block_quote":
        return Blockquote(_convert_blocks(children, depth + 1))
    if kind == "thematic_break":
        return ThematicBreak()
    if kind in _DROPPED_TYPES:
        return None
    if children:
        logger.debug("Flattening unsupported block token '%s'", kind)
        return _convert_blocks(children, depth + 1)
    return None


def from_tokens(tokens: Iterable[Token]) -> Document:
    """Build a Document from mistune's ``renderer="ast"`` token list."""
    return Document(_convert_blocks(tokens, 1))


class MarkdownParser:
    """Parse Markdown text with mistune and adapt the result."""

    def __init__(self, *, plugins: Optional[List[str]] = None) -> None:
        self._markdown = mistune.create_markdown(
            renderer="ast",
            plugins=list(plugins) if plugins is not None else ["strikethrough"],
        )

    def parse(self, source: str) -> Document:
        tokens = self._markdown(source)
        document = from_tokens(tokens)
        logger.debug("Parsed %d characters into %d blocks", len(source), len(document.blocks))
        return document


def parse_markdown(source: str | bytes) -> Document:
    if isinstance(source, bytes):
        source = source.decode("utf-8")
    return MarkdownParser().parse(source)


def _markdown_parser_factory(**options: Any) -> MarkdownParser:
    return MarkdownParser(**options)


try:
    register_parser("markdown", _markdown_parser_factory)
except ValueError:
    pass
