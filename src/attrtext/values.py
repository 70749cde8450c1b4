"""Value types stored and forwarded by the attributed text builders.

These are plain immutable records.  The builders never interpret them
beyond equality: a :class:`Font` is a name and a size, a :class:`Color`
is four channels, and so on.  Whatever renders the final document is
responsible for giving them meaning.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Optional, Union


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Color:
    """RGBA color with channels in the 0-255 range."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional)."""
        raw = value.strip().lstrip("#")
        if len(raw) not in (6, 8) or not all(c in string.hexdigits for c in raw):
            raise ValueError(f"Invalid hex color {value!r}")
        channels = [int(raw[i:i + 2], 16) for i in range(0, len(raw), 2)]
        return cls(*channels)

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
GRAY = Color(128, 128, 128)
CLEAR = Color(0, 0, 0, 0)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "gray": GRAY,
    "clear": CLEAR,
}


# ---------------------------------------------------------------------------
# Geometry and fonts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Size:
    """Width/height pair, used for shadow offsets."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Font:
    """Reference to a font by family name and point size."""

    name: str
    size: float

    def with_size(self, size: float) -> Font:
        return Font(self.name, size)


@dataclass(frozen=True)
class Shadow:
    """Shadow descriptor.  ``color`` of ``None`` means the renderer default."""

    offset: Size
    blur_radius: float
    color: Optional[Color] = None


# ---------------------------------------------------------------------------
# Style constants
# ---------------------------------------------------------------------------

class UnderlineStyle(IntFlag):
    """Line style for underline and strikethrough.

    Line weight and pattern bits combine, e.g.
    ``UnderlineStyle.SINGLE | UnderlineStyle.PATTERN_DOT``.
    """

    NONE = 0x00
    SINGLE = 0x01
    THICK = 0x02
    DOUBLE = 0x09
    PATTERN_DOT = 0x0100
    PATTERN_DASH = 0x0200
    PATTERN_DASH_DOT = 0x0300
    PATTERN_DASH_DOT_DOT = 0x0400
    BY_WORD = 0x8000


LineStyleValue = Union[UnderlineStyle, int]

_KNOWN_LINE_STYLE_BITS = 0
for _member in UnderlineStyle.__members__.values():
    _KNOWN_LINE_STYLE_BITS |= _member.value
del _member


def coerce_line_style(value: LineStyleValue) -> LineStyleValue:
    """Turn a raw integer into an :class:`UnderlineStyle` when possible.

    Integers the flag type cannot represent are kept as plain ints.  They
    are forwarded untouched and whatever the renderer does with them is
    undefined, but building never fails because of them.
    """
    if isinstance(value, UnderlineStyle):
        return value
    raw = int(value)
    if raw < 0 or raw & ~_KNOWN_LINE_STYLE_BITS:
        return raw
    return UnderlineStyle(raw)


class TextAlignment(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2
    JUSTIFIED = 3
    NATURAL = 4


class LineBreakMode(Enum):
    WORD_WRAPPING = 0
    CHAR_WRAPPING = 1
    CLIPPING = 2
    TRUNCATING_HEAD = 3
    TRUNCATING_TAIL = 4
    TRUNCATING_MIDDLE = 5


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph formatting descriptor.

    Defaults mirror what a text renderer uses when no paragraph style is
    attached at all; zero heights mean "no limit".
    """

    alignment: TextAlignment = TextAlignment.NATURAL
    line_break_mode: LineBreakMode = LineBreakMode.WORD_WRAPPING
    minimum_line_height: float = 0.0
    maximum_line_height: float = 0.0
    line_spacing: float = 0.0
