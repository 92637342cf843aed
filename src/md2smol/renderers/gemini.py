from __future__ import annotations

from typing import Any, List, Tuple

from ..models import Block, CodeBlock, Heading, Link, List as ListBlock, ThematicBreak
from ..options import RenderOptions
from ..plugins import register_renderer
from .base import TreeRenderer, Verbatim


FENCE = "```"


class GeminiRenderer(TreeRenderer):
    """Render documents as gemtext for the Gemini protocol.

    Gemtext links must sit on their own line, so link text stays in the
    prose and every link of a top-level block is repeated after that block
    as ``=> href text``. This happens regardless of the link options.
    """

    name = "gemini"

    def __init__(self, options: RenderOptions) -> None:
        super().__init__(options)
        self._pending_links: List[Tuple[str, str]] = []
        self._link_lines = 0

    def render(self, document) -> str:
        self._pending_links = []
        self._link_lines = 0
        return super().render(document)

    def _render_heading(self, block: Heading, depth: int, width: int) -> List[str]:
        marker = "#" * block.level + " "
        text = self._render_inline(block.inline).replace("\n", " ")
        return self._wrap_text(text, width, initial=marker)

    def _render_code_block(self, block: CodeBlock, depth: int, width: int) -> List[str]:
        header = f"{FENCE}{block.language}" if block.language else FENCE
        body = block.literal[:-1] if block.literal.endswith("\n") else block.literal
        lines = [Verbatim(header)]
        if body:
            lines.extend(Verbatim(line) for line in body.split("\n"))
        lines.append(Verbatim(FENCE))
        return lines

    def _render_thematic_break(self, block: ThematicBreak, depth: int, width: int) -> List[str]:
        return ["---"]

    def _list_marker(self, block: ListBlock, index: int) -> str:
        if block.ordered:
            return f"{block.start + index}. "
        return "* "

    def _list_continuation(self, marker: str) -> str:
        # Gemtext has no nesting; indented lines would read as plain text.
        return ""

    def _prefix_lines(self, lines: List[str], first: str, rest: str) -> List[str]:
        if lines and isinstance(lines[0], Verbatim):
            # A fence must start its line; give the marker a line of its own.
            lines = ["", *lines]
        return super()._prefix_lines(lines, first, rest)

    def _link_count(self) -> int:
        return self._link_lines

    def _quote_verbatim(self, line: Verbatim) -> Verbatim:
        return line

    def _render_link(self, node: Link, text: str) -> str:
        if node.href:
            self._pending_links.append((node.href, text.replace("\n", " ").strip()))
        return text

    def _after_top_level_block(self, block: Block) -> List[str]:
        lines = [Verbatim(f"=> {href} {text}" if text else f"=> {href}") for href, text in self._pending_links]
        self._link_lines += len(lines)
        self._pending_links = []
        return lines


def _gemini_renderer_factory(*, options: RenderOptions, **_: Any) -> GeminiRenderer:
    return GeminiRenderer(options)


try:
    register_renderer("gemini", _gemini_renderer_factory)
except ValueError:
    pass
