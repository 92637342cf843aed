from __future__ import annotations

import re
from typing import Any

from ..extract import iter_segments
from ..models import Document
from ..options import RenderOptions
from ..plugins import register_renderer
from ..utils.logger import get_logger
from ..wrap import truncate


logger = get_logger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


class FingerRenderer:
    """Flatten a document into one compact, unformatted line for Finger."""

    name = "finger"

    def __init__(self, options: RenderOptions) -> None:
        self.options = options

    def render(self, document: Document) -> str:
        parts = []
        for segment, is_code in iter_segments(document):
            segment = segment.replace("\r\n", " ").replace("\n", " ")
            if self.options.compact_mode and not is_code:
                # Code keeps its inner spacing; only prose is collapsed.
                segment = WHITESPACE_RE.sub(" ", segment).strip()
            if segment.strip():
                parts.append(segment)
        text = " ".join(parts)
        if self.options.compact_mode:
            text = text.strip()
            if self.options.width > 0:
                truncated = truncate(text, self.options.width)
                if truncated != text:
                    logger.debug("Truncated finger text from %d to %d characters", len(text), len(truncated))
                text = truncated
        return text


def _finger_renderer_factory(*, options: RenderOptions, **_: Any) -> FingerRenderer:
    return FingerRenderer(options)


try:
    register_renderer("finger", _finger_renderer_factory)
except ValueError:
    pass
