"""Bundled renderer implementations."""

from .base import TreeRenderer, Verbatim
from .finger import FingerRenderer
from .gemini import GeminiRenderer
from .gopher import GopherRenderer

__all__ = ["FingerRenderer", "GeminiRenderer", "GopherRenderer", "TreeRenderer", "Verbatim"]
