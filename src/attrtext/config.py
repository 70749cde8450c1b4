"""Build styles from loosely typed option mappings.

Command-line flags, form fields and JSON payloads all arrive as plain
strings and numbers.  :func:`builder_from_options` converts such a mapping
into setter calls on an :class:`~attrtext.builder.AttributedBuilder`,
rejecting anything it cannot interpret with a
:class:`~attrtext.errors.StyleOptionError`.

Example::

    builder = builder_from_options({
        "color": "#ff0000",
        "font": "Helvetica",
        "font_size": 14,
        "align": "center",
        "uppercase": True,
    })
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Optional, TypeVar

from attrtext.builder import AttributedBuilder
from attrtext.errors import StyleOptionError, UnknownColorError
from attrtext.values import (
    NAMED_COLORS,
    Color,
    Font,
    LineBreakMode,
    Size,
    TextAlignment,
    UnderlineStyle,
)

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)

DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_FONT_SIZE = 12.0

# Option name -> human readable description, in application order.
OPTIONS: dict[str, str] = {
    "color": "foreground color (hex or name)",
    "background": "background color",
    "strikethrough": "strikethrough line style",
    "strikethrough_color": "strikethrough color",
    "underline": "underline line style",
    "underline_color": "underline color",
    "shadow_offset": "shadow offset as 'width,height'",
    "shadow_blur": "shadow blur radius",
    "shadow_color": "shadow color",
    "letter_spacing": "letter spacing (kern)",
    "uppercase": "uppercase the text",
    "font": "font family name",
    "font_size": "font size in points",
    "baseline_offset": "baseline offset",
    "align": "paragraph alignment",
    "line_break": "line break mode",
    "min_line_height": "minimum line height",
    "max_line_height": "maximum line height",
    "line_spacing": "spacing between lines",
}


# ---------------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------------

def parse_color(option: str, value: Any) -> Color:
    """Accept a :class:`Color`, a color name or a hex string."""
    if isinstance(value, Color):
        return value
    text = str(value).strip()
    named = NAMED_COLORS.get(text.lower())
    if named is not None:
        return named
    try:
        return Color.from_hex(text)
    except ValueError:
        raise UnknownColorError(option, value, sorted(NAMED_COLORS)) from None


def parse_float(option: str, value: Any) -> float:
    if isinstance(value, bool):
        raise StyleOptionError(option, value, "expected a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise StyleOptionError(option, value, "expected a number") from None


def parse_bool(option: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise StyleOptionError(option, value, "expected a boolean")


def parse_size(option: str, value: Any) -> Size:
    """Accept a :class:`Size`, a ``(w, h)`` pair or a ``"w,h"`` string."""
    if isinstance(value, Size):
        return value
    parts = value.split(",") if isinstance(value, str) else value
    try:
        width, height = parts
    except (TypeError, ValueError):
        raise StyleOptionError(option, value, "expected 'width,height'") from None
    return Size(parse_float(option, width), parse_float(option, height))


def parse_enum(option: str, value: Any, enum_cls: type[_E]) -> _E:
    """Look up an enum member by name, case-insensitively."""
    if isinstance(value, enum_cls):
        return value
    key = str(value).strip().upper().replace("-", "_")
    try:
        return enum_cls[key]
    except KeyError:
        choices = [m.name.lower() for m in enum_cls]
        raise StyleOptionError(option, value, "unknown name", choices) from None


def parse_line_style(option: str, value: Any) -> UnderlineStyle | int:
    """Accept a style name (``single``, ``double|pattern_dot``) or a raw integer."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    style = UnderlineStyle.NONE
    for part in text.split("|"):
        style |= parse_enum(option, part, UnderlineStyle)
    return style


# ---------------------------------------------------------------------------
# Builder construction
# ---------------------------------------------------------------------------

def builder_from_options(
    options: Mapping[str, Any],
    base: Optional[AttributedBuilder] = None,
) -> AttributedBuilder:
    """Return a builder configured from *options*.

    When *base* is given, a copy of it is extended; *base* itself is left
    untouched.  ``None`` values are skipped so that unset command-line
    flags can be passed straight through.

    Raises:
        StyleOptionError: if an option name is unknown or a value cannot
            be parsed.
    """
    unknown = [name for name in options if name not in OPTIONS]
    if unknown:
        raise StyleOptionError(unknown[0], options[unknown[0]], "unknown option", list(OPTIONS))

    builder = base.copy() if base is not None else AttributedBuilder()
    opts = {k: v for k, v in options.items() if v is not None}
    logger.debug("Applying style options: %s", sorted(opts))

    if "color" in opts:
        builder.color(text=parse_color("color", opts["color"]))
    if "background" in opts:
        builder.color(background=parse_color("background", opts["background"]))
    if "strikethrough" in opts:
        builder.style(strikethrough=parse_line_style("strikethrough", opts["strikethrough"]))
    if "strikethrough_color" in opts:
        builder.color(strikethrough=parse_color("strikethrough_color", opts["strikethrough_color"]))
    if "underline" in opts:
        builder.style(underline=parse_line_style("underline", opts["underline"]))
    if "underline_color" in opts:
        builder.color(underline=parse_color("underline_color", opts["underline_color"]))

    if "shadow_offset" in opts or "shadow_blur" in opts:
        if "shadow_offset" not in opts or "shadow_blur" not in opts:
            missing = "shadow_blur" if "shadow_offset" in opts else "shadow_offset"
            raise StyleOptionError(missing, None, "shadow needs both shadow_offset and shadow_blur")
        builder.shadow(
            parse_size("shadow_offset", opts["shadow_offset"]),
            parse_float("shadow_blur", opts["shadow_blur"]),
        )
    if "shadow_color" in opts:
        builder.color(shadow=parse_color("shadow_color", opts["shadow_color"]))

    if "letter_spacing" in opts:
        builder.letter_spacing(parse_float("letter_spacing", opts["letter_spacing"]))
    if "uppercase" in opts:
        builder.style(uppercased=parse_bool("uppercase", opts["uppercase"]))

    if "font" in opts or "font_size" in opts:
        current = builder.state.font
        name = str(opts.get("font") or (current.name if current else DEFAULT_FONT_NAME))
        if "font_size" in opts:
            size = parse_float("font_size", opts["font_size"])
        else:
            size = current.size if current else DEFAULT_FONT_SIZE
        builder.font(Font(name, size))
    if "baseline_offset" in opts:
        builder.line(base_offset=parse_float("baseline_offset", opts["baseline_offset"]))

    if "align" in opts:
        builder.text_alignment(parse_enum("align", opts["align"], TextAlignment))
    if "line_break" in opts:
        builder.line(break_mode=parse_enum("line_break", opts["line_break"], LineBreakMode))
    if "min_line_height" in opts:
        builder.line(minimum_height=parse_float("min_line_height", opts["min_line_height"]))
    if "max_line_height" in opts:
        builder.line(maximum_height=parse_float("max_line_height", opts["max_line_height"]))
    if "line_spacing" in opts:
        builder.line(space=parse_float("line_spacing", opts["line_spacing"]))

    return builder
