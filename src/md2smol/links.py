from __future__ import annotations

from typing import Dict, List, Tuple


class LinkRegistry:
    """Number link targets in order of first appearance during one render."""

    def __init__(self) -> None:
        self._indices: Dict[str, int] = {}
        self._entries: List[Tuple[int, str]] = []

    def register(self, href: str) -> int:
        index = self._indices.get(href)
        if index is None:
            index = len(self._entries) + 1
            self._indices[href] = index
            self._entries.append((index, href))
        return index

    @property
    def entries(self) -> List[Tuple[int, str]]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, href: object) -> bool:
        return href in self._indices

    def render_footnotes(self) -> str:
        if not self._entries:
            return ""
        lines = ["Links:"]
        lines.extend(f"[{index}] {href}" for index, href in self._entries)
        return "\n".join(lines)
