"""Flatten document trees to plain text."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .errors import StructuralError
from .models import (
    MAX_DEPTH,
    Blockquote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    LineBreak,
    Link,
    List as ListBlock,
    Node,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)


def extract_inline(inlines: Iterable[Node], *, include_hrefs: bool = False) -> str:
    """Concatenate the literal text of an inline run.

    Emphasis, strong and link nodes only contribute their children. A link's
    href is appended as ``text (href)`` when ``include_hrefs`` is set.
    Nesting deeper than ``MAX_DEPTH`` raises :class:`StructuralError`.
    """
    return _inline_text(inlines, include_hrefs, 1)


def _check_depth(depth: int) -> None:
    if depth > MAX_DEPTH:
        raise StructuralError(f"Document nesting exceeds the maximum depth of {MAX_DEPTH}.")


def _inline_text(inlines: Iterable[Node], include_hrefs: bool, depth: int) -> str:
    _check_depth(depth)
    parts: List[str] = []
    for node in inlines:
        if isinstance(node, Text):
            parts.append(node.text)
        elif isinstance(node, Code):
            parts.append(node.literal)
        elif isinstance(node, LineBreak):
            parts.append("\n")
        elif isinstance(node, Link):
            text = _inline_text(node.children, include_hrefs, depth + 1)
            if include_hrefs and node.href:
                text = f"{text} ({node.href})" if text else node.href
            parts.append(text)
        elif isinstance(node, (Emphasis, Strong)):
            parts.append(_inline_text(node.children, include_hrefs, depth + 1))
    return "".join(parts)


def extract_blocks(node: Node, *, include_hrefs: bool = False) -> List[str]:
    """Return one text segment per leaf block below ``node``.

    The caller decides how segments are joined.
    """
    return [text for text, _ in iter_segments(node, include_hrefs=include_hrefs)]


def iter_segments(node: Node, *, include_hrefs: bool = False) -> Iterator[Tuple[str, bool]]:
    """Yield ``(text, is_code)`` for each leaf block below ``node``."""
    segments: List[Tuple[str, bool]] = []
    _collect(node, segments, include_hrefs, 0 if isinstance(node, Document) else 1)
    yield from segments


def _collect(node: Node, segments: List[Tuple[str, bool]], include_hrefs: bool, depth: int) -> None:
    _check_depth(depth)
    if isinstance(node, Document):
        for block in node.blocks:
            _collect(block, segments, include_hrefs, depth + 1)
    elif isinstance(node, (Heading, Paragraph)):
        segments.append((_inline_text(node.inline, include_hrefs, depth + 1), False))
    elif isinstance(node, CodeBlock):
        segments.append((node.literal.rstrip("\n"), True))
    elif isinstance(node, ListBlock):
        for item in node.items:
            for block in item:
                _collect(block, segments, include_hrefs, depth + 1)
    elif isinstance(node, Blockquote):
        for block in node.children:
            _collect(block, segments, include_hrefs, depth + 1)
    elif isinstance(node, ThematicBreak):
        return
    else:
        segments.append((_inline_text([node], include_hrefs, depth), False))


def extract_text(node: Node, separator: str = "\n", *, include_hrefs: bool = False) -> str:
    return separator.join(extract_blocks(node, include_hrefs=include_hrefs))
