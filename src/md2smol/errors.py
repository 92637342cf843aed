from __future__ import annotations


class RenderError(Exception):
    """Base class for everything the renderer raises."""


class ConfigError(RenderError, ValueError):
    """An option or target name is invalid; nothing was rendered."""


class StructuralError(RenderError):
    """The document tree is not a well-formed tree of model nodes."""
