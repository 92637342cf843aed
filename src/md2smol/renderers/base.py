from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..errors import StructuralError
from ..links import LinkRegistry
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
from ..options import RenderOptions
from ..utils.logger import get_logger
from ..wrap import wrap_lines


logger = get_logger(__name__)


class Verbatim(str):
    """A preformatted output line; never wrapped or re-prefixed as prose."""


class TreeRenderer:
    """Depth-first, pre-order walk shared by the line-oriented renderers.

    Subclasses supply the per-node encodings; lists, blockquotes, paragraphs
    and inline runs are walked here. A renderer instance is built for a
    single render call, and ``render`` resets all per-call state anyway.
    """

    name = "tree"

    def __init__(self, options: RenderOptions) -> None:
        self.options = options
        self.width = options.width
        self.links = LinkRegistry()
        self._handlers: Dict[type, Callable[[Block, int, int], List[str]]] = {
            Heading: self._render_heading,
            Paragraph: self._render_paragraph,
            ListBlock: self._render_list,
            CodeBlock: self._render_code_block,
            Blockquote: self._render_blockquote,
            ThematicBreak: self._render_thematic_break,
        }

    def render(self, document: Document) -> str:
        self.links = LinkRegistry()
        output: List[str] = []
        for block in document.blocks:
            lines = self._render_block(block, 1, self.width)
            lines.extend(self._after_top_level_block(block))
            self._append_block(output, lines)
        output = self._finalize(output)
        logger.debug(
            "Rendered %d blocks as %s (%d lines, %d links)",
            len(document.blocks),
            self.name,
            len(output),
            self._link_count(),
        )
        return "\n".join(output)

    # Hooks ---------------------------------------------------------------
    def _link_count(self) -> int:
        return len(self.links)

    def _after_top_level_block(self, block: Block) -> List[str]:
        return []

    def _finalize(self, output: List[str]) -> List[str]:
        return output

    def _render_heading(self, block: Heading, depth: int, width: int) -> List[str]:
        raise NotImplementedError

    def _render_code_block(self, block: CodeBlock, depth: int, width: int) -> List[str]:
        raise NotImplementedError

    def _render_thematic_break(self, block: ThematicBreak, depth: int, width: int) -> List[str]:
        raise NotImplementedError

    def _list_marker(self, block: ListBlock, index: int) -> str:
        raise NotImplementedError

    def _list_continuation(self, marker: str) -> str:
        return " " * len(marker)

    def _quote_verbatim(self, line: Verbatim) -> Verbatim:
        return Verbatim(f"> {line}" if line else ">")

    def _render_link(self, node: Link, text: str) -> str:
        return text

    def _render_code_span(self, node: Code) -> str:
        return node.literal

    def _render_emphasis(self, node: Inline, text: str) -> str:
        return text

    # Blocks --------------------------------------------------------------
    def _render_block(self, block: Block, depth: int, width: int) -> List[str]:
        if depth > MAX_DEPTH:
            raise StructuralError(f"Document nesting exceeds the maximum depth of {MAX_DEPTH}.")
        handler = self._handlers.get(type(block))
        if handler is None:
            raise StructuralError(f"Cannot render {type(block).__name__} as a block.")
        return handler(block, depth, width)

    def _render_blocks(
        self,
        blocks: Iterable[Block],
        depth: int,
        width: int,
        *,
        separate: bool = True,
    ) -> List[str]:
        output: List[str] = []
        for block in blocks:
            lines = self._render_block(block, depth, width)
            if separate:
                self._append_block(output, lines)
            else:
                output.extend(lines)
        return output

    def _render_paragraph(self, block: Paragraph, depth: int, width: int) -> List[str]:
        return self._wrap_text(self._render_inline(block.inline), width)

    def _render_list(self, block: ListBlock, depth: int, width: int) -> List[str]:
        output: List[str] = []
        for index, item in enumerate(block.items):
            marker = self._list_marker(block, index)
            continuation = self._list_continuation(marker)
            inner_width = max(1, width - len(marker)) if width > 0 else 0
            lines = self._render_blocks(item, depth + 1, inner_width, separate=False)
            if not lines:
                lines = [""]
            output.extend(self._prefix_lines(lines, marker, continuation))
        return output

    def _render_blockquote(self, block: Blockquote, depth: int, width: int) -> List[str]:
        inner_width = max(1, width - 2) if width > 0 else 0
        lines = self._render_blocks(block.children, depth + 1, inner_width)
        quoted: List[str] = []
        for line in lines:
            if isinstance(line, Verbatim):
                quoted.append(self._quote_verbatim(line))
            else:
                quoted.append(f"> {line}".rstrip())
        return quoted

    # Inlines -------------------------------------------------------------
    def _render_inline(self, inlines: Sequence[Inline]) -> str:
        parts: List[str] = []
        for node in inlines:
            if isinstance(node, Text):
                parts.append(node.text)
            elif isinstance(node, Code):
                parts.append(self._render_code_span(node))
            elif isinstance(node, LineBreak):
                parts.append("\n")
            elif isinstance(node, Link):
                parts.append(self._render_link(node, self._render_inline(node.children)))
            elif isinstance(node, (Emphasis, Strong)):
                parts.append(self._render_emphasis(node, self._render_inline(node.children)))
            else:
                raise StructuralError(f"Cannot render {type(node).__name__} inline.")
        return "".join(parts)

    # Utilities -----------------------------------------------------------
    def _wrap_text(
        self,
        text: str,
        width: int,
        *,
        initial: str = "",
        subsequent: Optional[str] = None,
    ) -> List[str]:
        continuation = initial if subsequent is None else subsequent
        lines: List[str] = []
        for index, piece in enumerate(text.split("\n")):
            first = initial if index == 0 else continuation
            lines.extend(wrap_lines(piece, width, initial=first, subsequent=continuation))
        return lines

    @staticmethod
    def _prefix_lines(lines: List[str], first: str, rest: str) -> List[str]:
        prefixed: List[str] = []
        for index, line in enumerate(lines):
            prefix = first if index == 0 else rest
            if isinstance(line, Verbatim):
                prefixed.append(Verbatim(f"{prefix}{line}" if line else prefix.rstrip()))
            else:
                prefixed.append(f"{prefix}{line}".rstrip())
        return prefixed

    @staticmethod
    def _append_block(output: List[str], lines: List[str]) -> None:
        if not lines:
            return
        if output and output[-1] != "":
            output.append("")
        output.extend(lines)
