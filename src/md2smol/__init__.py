"""Render parsed Markdown for Gopher, Gemini and Finger."""

from .conversion.dispatch import (
    extract_text,
    render,
    render_finger,
    render_gemini,
    render_gopher,
    render_markdown,
)
from .errors import ConfigError, RenderError, StructuralError
from .links import LinkRegistry
from .models import (
    Blockquote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
    check_structure,
)
from .options import LinkStyle, RenderOptions, Target, default_options, options_from_mapping
from .parsers import parse_markdown
from .wrap import truncate, wrap

__version__ = "0.1.0"

__all__ = [
    "Blockquote",
    "Code",
    "CodeBlock",
    "ConfigError",
    "Document",
    "Emphasis",
    "Heading",
    "LineBreak",
    "Link",
    "LinkRegistry",
    "LinkStyle",
    "List",
    "Paragraph",
    "RenderError",
    "RenderOptions",
    "Strong",
    "StructuralError",
    "Target",
    "Text",
    "ThematicBreak",
    "check_structure",
    "default_options",
    "extract_text",
    "options_from_mapping",
    "parse_markdown",
    "render",
    "render_finger",
    "render_gemini",
    "render_gopher",
    "render_markdown",
    "truncate",
    "wrap",
]
