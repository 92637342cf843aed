from __future__ import annotations

from typing import Any, List

from ..models import Code, CodeBlock, Heading, Link, List as ListBlock, ThematicBreak
from ..options import LinkStyle, RenderOptions
from ..plugins import register_renderer
from .base import TreeRenderer, Verbatim


BULLET = "• "
RULE_CHAR = "-"


class GopherRenderer(TreeRenderer):
    """Render documents as plain text for Gopher menus and text files.

    Gopher has no link syntax, so link text stays in place while the URL is
    dropped, shown in parentheses or moved to a numbered ``Links:`` section.
    """

    name = "gopher"

    def _render_heading(self, block: Heading, depth: int, width: int) -> List[str]:
        return self._wrap_text(self._render_inline(block.inline), width)

    def _render_code_block(self, block: CodeBlock, depth: int, width: int) -> List[str]:
        return [Verbatim(line) for line in block.literal.rstrip("\n").split("\n")]

    def _render_thematic_break(self, block: ThematicBreak, depth: int, width: int) -> List[str]:
        return [RULE_CHAR * width if width > 0 else RULE_CHAR * 3]

    def _list_marker(self, block: ListBlock, index: int) -> str:
        if block.ordered:
            return f"{block.start + index}. "
        return BULLET

    def _render_code_span(self, node: Code) -> str:
        if self.options.strip_formatting:
            return node.literal
        return f"`{node.literal}`"

    def _render_link(self, node: Link, text: str) -> str:
        if not self.options.preserve_links or not node.href:
            return text
        if self.options.link_style is LinkStyle.INLINE:
            return f"{text} ({node.href})" if text else node.href
        index = self.links.register(node.href)
        return f"{text or node.href} [{index}]"

    def _finalize(self, output: List[str]) -> List[str]:
        footnotes = self.links.render_footnotes()
        if not footnotes:
            return output
        if output and output[-1] != "":
            output.append("")
        # Entries stay whole; a URL on its own line is useless to a reader.
        output.extend(footnotes.split("\n"))
        return output


def _gopher_renderer_factory(*, options: RenderOptions, **_: Any) -> GopherRenderer:
    return GopherRenderer(options)


try:
    register_renderer("gopher", _gopher_renderer_factory)
except ValueError:
    pass
