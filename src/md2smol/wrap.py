"""Line wrapping and length budgets.

Widths are counted in codepoints, so multi-byte characters are never split.
"""

from __future__ import annotations

import textwrap
from typing import List, Optional

from .errors import ConfigError


ELLIPSIS = "..."


def _check_width(width: int) -> None:
    if width < 0:
        raise ConfigError(f"Width must be zero or positive, got {width}.")


def wrap_lines(
    text: str,
    width: int,
    *,
    initial: str = "",
    subsequent: Optional[str] = None,
) -> List[str]:
    """Wrap a single logical line, prefixing the first and following lines.

    Words longer than the available width are kept whole. A blank input
    yields the bare prefix.
    """
    _check_width(width)
    subsequent = initial if subsequent is None else subsequent
    if width == 0:
        return [f"{initial}{text}".rstrip()] if text.strip() else [initial.rstrip()]
    wrapper = textwrap.TextWrapper(
        width=max(width, len(initial) + 1, len(subsequent) + 1),
        expand_tabs=False,
        break_long_words=False,
        break_on_hyphens=False,
        initial_indent=initial,
        subsequent_indent=subsequent,
    )
    wrapped = wrapper.wrap(text)
    if not wrapped:
        return [initial.rstrip()]
    return [line.rstrip() for line in wrapped]


def wrap(text: str, width: int) -> str:
    """Reflow every line of ``text`` to at most ``width`` codepoints."""
    _check_width(width)
    if width == 0:
        return text
    lines: List[str] = []
    for line in text.split("\n"):
        if not line.strip():
            lines.append("")
            continue
        lines.extend(wrap_lines(line, width))
    return "\n".join(lines)


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` codepoints, ending in an ellipsis when cut."""
    _check_width(width)
    if len(text) <= width:
        return text
    if width < len(ELLIPSIS):
        return ELLIPSIS[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS
