from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .errors import ConfigError


class Target(Enum):
    GOPHER = "gopher"
    GEMINI = "gemini"
    FINGER = "finger"

    @classmethod
    def coerce(cls, value: Union["Target", str]) -> "Target":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ConfigError(f"Unknown render target '{value}'.") from exc


class LinkStyle(Enum):
    INLINE = "inline"
    FOOTNOTE = "footnote"
    # Gemini link lines; always emitted after the containing block.
    LINE = "line"

    @classmethod
    def coerce(cls, value: Union["LinkStyle", str]) -> "LinkStyle":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        # "reference" is the name older configurations used for footnotes.
        if normalized == "reference":
            normalized = cls.FOOTNOTE.value
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ConfigError(f"Unknown link style '{value}'.") from exc


@dataclass(frozen=True)
class RenderOptions:
    width: int = 0
    preserve_links: bool = True
    link_style: LinkStyle = LinkStyle.FOOTNOTE
    compact_mode: bool = False
    strip_formatting: bool = False

    def validate(self) -> "RenderOptions":
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ConfigError(f"Width must be an integer, got {self.width!r}.")
        if self.width < 0:
            raise ConfigError(f"Width must be zero or positive, got {self.width}.")
        if not isinstance(self.link_style, LinkStyle):
            raise ConfigError(f"link_style must be a LinkStyle, got {self.link_style!r}.")
        for name in ("preserve_links", "compact_mode", "strip_formatting"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean, got {getattr(self, name)!r}.")
        return self

    def replace(self, **changes: Any) -> "RenderOptions":
        return replace(self, **changes)


_DEFAULTS: Dict[Target, RenderOptions] = {
    Target.GOPHER: RenderOptions(
        width=70,
        preserve_links=True,
        link_style=LinkStyle.FOOTNOTE,
        compact_mode=False,
        strip_formatting=False,
    ),
    Target.GEMINI: RenderOptions(
        width=0,
        preserve_links=True,
        link_style=LinkStyle.LINE,
        compact_mode=False,
        strip_formatting=False,
    ),
    Target.FINGER: RenderOptions(
        width=0,
        preserve_links=False,
        link_style=LinkStyle.INLINE,
        compact_mode=True,
        strip_formatting=True,
    ),
}


def default_options(target: Union[Target, str]) -> RenderOptions:
    return _DEFAULTS[Target.coerce(target)]


_OPTION_ALIASES = {
    "preservelinks": "preserve_links",
    "linkstyle": "link_style",
    "compact": "compact_mode",
    "compactmode": "compact_mode",
    "stripformatting": "strip_formatting",
}


def _parse_int(key: str, value: str) -> int:
    stripped = value.strip()
    if not re.fullmatch(r"-?\d+", stripped):
        raise ConfigError(f"Option '{key}' expects an integer, got '{value}'.")
    return int(stripped)


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"true", "yes", "1", "on"}:
        return True
    if lowered in {"false", "no", "0", "off"}:
        return False
    raise ConfigError(f"Option '{key}' expects a boolean, got '{value}'.")


def _normalize_key(raw_key: str) -> str:
    key = raw_key.strip().lower().replace("-", "_")
    return _OPTION_ALIASES.get(key.replace("_", ""), key)


def is_render_option(key: str) -> bool:
    return _normalize_key(key) in {field.name for field in fields(RenderOptions)}


def options_from_mapping(
    base: RenderOptions,
    mapping: Optional[Mapping[str, Any]],
) -> RenderOptions:
    """Apply ``KEY=VALUE`` style overrides to ``base``.

    Values may be strings (from the command line or front matter) or already
    typed. The result is validated.
    """
    if not mapping:
        return base.validate()
    known = {field.name for field in fields(RenderOptions)}
    changes: Dict[str, Any] = {}
    for raw_key, value in mapping.items():
        key = _normalize_key(raw_key)
        if key not in known:
            raise ConfigError(f"Unknown render option '{raw_key}'.")
        if key == "width":
            changes[key] = _parse_int(key, value) if isinstance(value, str) else value
        elif key == "link_style":
            changes[key] = LinkStyle.coerce(value)
        else:
            changes[key] = _parse_bool(key, value) if isinstance(value, str) else value
    return base.replace(**changes).validate()
