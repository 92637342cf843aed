"""Pick a renderer for a target and run it with validated options."""

from __future__ import annotations

from typing import Optional, Union

from .. import parsers as _parsers  # noqa: F401 - registers the markdown parser
from .. import renderers as _renderers  # noqa: F401 - registers bundled renderers
from ..errors import ConfigError
from ..extract import extract_text as _extract_text
from ..models import Document, check_structure
from ..options import RenderOptions, Target, default_options
from ..plugins import get_parser_factory, get_renderer_factory
from ..utils.logger import get_logger
from .core import RendererFactory, run_conversion, run_pipeline


logger = get_logger(__name__)


def _resolve(
    target: Union[Target, str],
    options: Optional[RenderOptions],
) -> tuple[Target, RenderOptions, RendererFactory]:
    resolved_target = Target.coerce(target)
    resolved_options = default_options(resolved_target) if options is None else options
    if not isinstance(resolved_options, RenderOptions):
        raise ConfigError(f"Expected RenderOptions, got {type(resolved_options).__name__}.")
    resolved_options.validate()
    try:
        factory = get_renderer_factory(resolved_target.value)
    except KeyError as exc:
        raise ConfigError(str(exc)) from exc
    return resolved_target, resolved_options, factory


def render(
    document: Document,
    target: Union[Target, str],
    options: Optional[RenderOptions] = None,
) -> str:
    """Render ``document`` for ``target``.

    Missing options fall back to the target's defaults. Raises
    :class:`~md2smol.errors.ConfigError` for bad options or targets and
    :class:`~md2smol.errors.StructuralError` for malformed trees; in both
    cases nothing is rendered.
    """
    resolved_target, resolved_options, factory = _resolve(target, options)
    logger.debug("Rendering for %s with %s", resolved_target.value, resolved_options)
    return run_pipeline(document, renderer=factory(options=resolved_options))


def render_gopher(document: Document, options: Optional[RenderOptions] = None) -> str:
    return render(document, Target.GOPHER, options)


def render_gemini(document: Document, options: Optional[RenderOptions] = None) -> str:
    return render(document, Target.GEMINI, options)


def render_finger(document: Document, options: Optional[RenderOptions] = None) -> str:
    return render(document, Target.FINGER, options)


def extract_text(document: Document) -> str:
    """Plain text of ``document``, one block per line, for indexing or previews."""
    check_structure(document)
    return _extract_text(document, "\n")


def render_markdown(
    source: Union[str, bytes],
    target: Union[Target, str],
    options: Optional[RenderOptions] = None,
    *,
    parser: str = "markdown",
) -> str:
    """Parse ``source`` with the named parser plugin and render it."""
    if isinstance(source, bytes):
        source = source.decode("utf-8")
    _, resolved_options, factory = _resolve(target, options)
    try:
        parser_factory = get_parser_factory(parser)
    except KeyError as exc:
        raise ConfigError(str(exc)) from exc
    return run_conversion(
        source,
        options=resolved_options,
        parser_factory=parser_factory,
        renderer_factory=factory,
    )
