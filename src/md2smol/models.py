from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Set, Tuple, Union

from .errors import StructuralError


MAX_DEPTH = 64


# Inline nodes ----------------------------------------------------------
@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Code:
    literal: str


@dataclass(frozen=True)
class LineBreak:
    pass


@dataclass(frozen=True)
class Emphasis:
    children: Tuple["Inline", ...] = ()


@dataclass(frozen=True)
class Strong:
    children: Tuple["Inline", ...] = ()


@dataclass(frozen=True)
class Link:
    href: str
    children: Tuple["Inline", ...] = ()


Inline = Union[Text, Code, LineBreak, Emphasis, Strong, Link]
INLINE_TYPES = (Text, Code, LineBreak, Emphasis, Strong, Link)


# Block nodes -----------------------------------------------------------
@dataclass(frozen=True)
class Heading:
    level: int
    inline: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class Paragraph:
    inline: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class List:
    ordered: bool
    items: Tuple[Tuple["Block", ...], ...] = ()
    start: int = 1


@dataclass(frozen=True)
class CodeBlock:
    literal: str
    language: Optional[str] = None


@dataclass(frozen=True)
class Blockquote:
    children: Tuple["Block", ...] = ()


@dataclass(frozen=True)
class ThematicBreak:
    pass


Block = Union[Heading, Paragraph, List, CodeBlock, Blockquote, ThematicBreak]
BLOCK_TYPES = (Heading, Paragraph, List, CodeBlock, Blockquote, ThematicBreak)


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...] = ()


Node = Union[Document, Block, Inline]


def check_structure(document: Document, *, max_depth: int = MAX_DEPTH) -> None:
    """Reject trees that are not proper, reasonably shallow trees.

    Every node must be reachable exactly once (no shared children, no
    cycles), blocks and inlines must sit where the model allows them and
    nesting may not exceed ``max_depth``.
    """
    if not isinstance(document, Document):
        raise StructuralError(f"Expected a Document, got {type(document).__name__}.")
    seen: Set[int] = set()
    for block in _as_tuple(document.blocks, "Document.blocks"):
        _check_block(block, 1, seen, max_depth)


def _visit(node: object, depth: int, seen: Set[int], max_depth: int) -> None:
    if depth > max_depth:
        raise StructuralError(f"Document nesting exceeds the maximum depth of {max_depth}.")
    key = id(node)
    if key in seen:
        raise StructuralError(f"{type(node).__name__} node appears more than once in the tree.")
    seen.add(key)


def _as_tuple(value: object, where: str) -> tuple:
    if isinstance(value, (str, bytes)) or not isinstance(value, (tuple, list)):
        raise StructuralError(f"{where} must be a sequence of nodes.")
    return tuple(value)


def _check_block(block: object, depth: int, seen: Set[int], max_depth: int) -> None:
    if not isinstance(block, BLOCK_TYPES):
        raise StructuralError(f"Expected a block node, got {type(block).__name__}.")
    _visit(block, depth, seen, max_depth)
    if isinstance(block, Heading):
        if not isinstance(block.level, int) or not 1 <= block.level <= 6:
            raise StructuralError(f"Heading level must be between 1 and 6, got {block.level!r}.")
        for child in _as_tuple(block.inline, "Heading.inline"):
            _check_inline(child, depth + 1, seen, max_depth)
    elif isinstance(block, Paragraph):
        for child in _as_tuple(block.inline, "Paragraph.inline"):
            _check_inline(child, depth + 1, seen, max_depth)
    elif isinstance(block, List):
        for item in _as_tuple(block.items, "List.items"):
            for child in _as_tuple(item, "List item"):
                _check_block(child, depth + 1, seen, max_depth)
    elif isinstance(block, Blockquote):
        for child in _as_tuple(block.children, "Blockquote.children"):
            _check_block(child, depth + 1, seen, max_depth)
    elif isinstance(block, CodeBlock):
        if not isinstance(block.literal, str):
            raise StructuralError("CodeBlock.literal must be a string.")


def _check_inline(node: object, depth: int, seen: Set[int], max_depth: int) -> None:
    if not isinstance(node, INLINE_TYPES):
        raise StructuralError(f"Expected an inline node, got {type(node).__name__}.")
    _visit(node, depth, seen, max_depth)
    if isinstance(node, Text) and not isinstance(node.text, str):
        raise StructuralError("Text.text must be a string.")
    if isinstance(node, Code) and not isinstance(node.literal, str):
        raise StructuralError("Code.literal must be a string.")
    if isinstance(node, Link) and not isinstance(node.href, str):
        raise StructuralError("Link.href must be a string.")
    if isinstance(node, (Emphasis, Strong, Link)):
        for child in _as_tuple(node.children, f"{type(node).__name__}.children"):
            _check_inline(child, depth + 1, seen, max_depth)
