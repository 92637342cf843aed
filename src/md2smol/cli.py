"""
Render a Markdown file for Gopher, Gemini or Finger.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .conversion.core import parse_frontmatter, read_lines
from .conversion.dispatch import render_markdown
from .errors import RenderError
from .options import Target, default_options, is_render_option, options_from_mapping
from .plugins import available_parsers
from .utils.logger import configure_logging, get_logger


logger = get_logger(__name__)


def _split_option(token: str) -> Tuple[str, str]:
    if "=" not in token:
        raise argparse.ArgumentTypeError("Expected KEY=VALUE format.")
    key, value = token.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Option key cannot be empty.")
    return key, value


def write_output(path: Optional[Path], text: str, *, crlf: bool = False) -> None:
    newline = "\r\n" if crlf else "\n"
    content = newline.join(text.split("\n")) + newline
    if path is None:
        sys.stdout.write(content)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render Markdown for Gopher, Gemini or Finger.")
    parser.add_argument("input_path", type=Path, help="Path to the Markdown input file.")
    parser.add_argument("-o", "--output", type=Path, help="Optional path to write the rendered text to.")
    parser.add_argument(
        "-t",
        "--target",
        default=Target.GOPHER.value,
        choices=[target.value for target in Target],
        help="Protocol to render for (default: gopher).",
    )
    parser.add_argument("--width", type=int, help="Override the target's line width (0 disables wrapping).")
    parser.add_argument(
        "--parser",
        default="markdown",
        choices=available_parsers() or ["markdown"],
        help="Name of the parser plugin to use.",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        type=_split_option,
        metavar="KEY=VALUE",
        help="Render option override in KEY=VALUE form (may repeat).",
    )
    parser.add_argument("--crlf", action="store_true", help="Terminate lines with CRLF, as Gopher servers do.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    lines = read_lines(args.input_path)
    frontmatter, content = parse_frontmatter(lines)
    overrides: Dict[str, str] = {key: value for key, value in frontmatter.items() if is_render_option(key)}
    if args.width is not None:
        overrides["width"] = str(args.width)
    overrides.update(dict(args.option or []))
    try:
        options = options_from_mapping(default_options(args.target), overrides)
        rendered = render_markdown("".join(content), args.target, options, parser=args.parser)
    except RenderError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    logger.debug("Rendered %s for %s", args.input_path, args.target)
    write_output(args.output, rendered, crlf=args.crlf)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
