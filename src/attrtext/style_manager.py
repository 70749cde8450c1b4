"""Named style presets.

Manages style presets (default, academic, business, minimal) that map
semantic style names (heading_1, body, caption, ...) to preconfigured
:class:`~attrtext.builder.AttributedBuilder` instances.
"""

from __future__ import annotations

import logging
from typing import Callable

from attrtext.builder import AttributedBuilder
from attrtext.values import (
    BLUE,
    GRAY,
    Color,
    Font,
    LineBreakMode,
    TextAlignment,
    UnderlineStyle,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------------

def _build_styles(
    body_font: Font,
    mono_font: Font,
    heading_sizes: dict[int, float],
    text_color: Color,
    accent_color: Color,
    line_spacing: float,
) -> dict[str, AttributedBuilder]:
    """Build the semantic styles shared by every preset from its palette."""

    body = (
        AttributedBuilder()
        .font(body_font)
        .color(text=text_color)
        .line(space=line_spacing)
    )

    styles: dict[str, AttributedBuilder] = {"body": body}

    for level in range(1, 7):
        styles[f"heading_{level}"] = (
            body.copy()
            .font(body_font.with_size(heading_sizes[level]))
            .text_alignment(TextAlignment.LEFT)
            .line(space=line_spacing / 2)
        )

    styles["caption"] = (
        body.copy()
        .font(body_font.with_size(body_font.size - 2))
        .color(text=GRAY)
        .line(break_mode=LineBreakMode.TRUNCATING_TAIL)
    )
    styles["code"] = (
        body.copy()
        .font(mono_font)
        .color(background=Color(245, 245, 245))
        .line(break_mode=LineBreakMode.CHAR_WRAPPING)
    )
    styles["emphasis"] = body.copy().color(text=accent_color)
    styles["link"] = (
        body.copy()
        .color(text=BLUE, underline=BLUE)
        .style(underline=UnderlineStyle.SINGLE)
    )
    styles["footnote"] = (
        body.copy()
        .font(body_font.with_size(body_font.size - 3))
        .line(base_offset=4.0)
    )
    styles["quote"] = (
        body.copy()
        .color(text=Color(85, 85, 85))
        .text_alignment(TextAlignment.CENTER)
    )
    return styles


def _build_default_styles() -> dict[str, AttributedBuilder]:
    """Build the **default** preset styles."""
    # Heading sizes: H1=22, H2=18, H3=14, H4=12, H5=11, H6=10
    return _build_styles(
        body_font=Font("Helvetica", 10.0),
        mono_font=Font("Menlo", 9.0),
        heading_sizes={1: 22.0, 2: 18.0, 3: 14.0, 4: 12.0, 5: 11.0, 6: 10.0},
        text_color=Color(0, 0, 0),
        accent_color=Color(192, 57, 43),
        line_spacing=4.0,
    )


def _build_academic_styles() -> dict[str, AttributedBuilder]:
    """Build the **academic** preset -- serif-focused, wider spacing."""
    styles = _build_styles(
        body_font=Font("Times New Roman", 11.0),
        mono_font=Font("Courier New", 9.5),
        heading_sizes={1: 24.0, 2: 20.0, 3: 16.0, 4: 13.0, 5: 12.0, 6: 11.0},
        text_color=Color(0, 0, 0),
        accent_color=Color(0, 0, 0),
        line_spacing=8.0,
    )
    styles["body"].text_alignment(TextAlignment.JUSTIFIED)
    styles["emphasis"].style(underline=UnderlineStyle.SINGLE)
    return styles


def _build_business_styles() -> dict[str, AttributedBuilder]:
    """Build the **business** preset -- sans-serif, compact."""
    styles = _build_styles(
        body_font=Font("Arial", 10.0),
        mono_font=Font("Consolas", 9.0),
        heading_sizes={1: 20.0, 2: 16.0, 3: 13.0, 4: 11.0, 5: 10.5, 6: 10.0},
        text_color=Color(33, 33, 33),
        accent_color=Color(0, 82, 155),
        line_spacing=3.0,
    )
    styles["heading_1"].style(uppercased=True).letter_spacing(1.0)
    return styles


def _build_minimal_styles() -> dict[str, AttributedBuilder]:
    """Build the **minimal** preset -- clean, tight spacing."""
    return _build_styles(
        body_font=Font("Helvetica Neue", 10.0),
        mono_font=Font("Menlo", 9.0),
        heading_sizes={1: 18.0, 2: 15.0, 3: 12.5, 4: 11.0, 5: 10.5, 6: 10.0},
        text_color=Color(34, 34, 34),
        accent_color=Color(102, 102, 102),
        line_spacing=2.0,
    )


# ---------------------------------------------------------------------------
# Preset registry
# ---------------------------------------------------------------------------

_PRESET_BUILDERS: dict[str, Callable[[], dict[str, AttributedBuilder]]] = {
    "default": _build_default_styles,
    "academic": _build_academic_styles,
    "business": _build_business_styles,
    "minimal": _build_minimal_styles,
}

# Semantic names every preset defines, taken from the shared palette builder.
STYLE_NAMES: tuple[str, ...] = tuple(sorted(_build_default_styles()))


# ---------------------------------------------------------------------------
# StyleManager
# ---------------------------------------------------------------------------

class StyleManager:
    """Manages style presets and hands out preconfigured builders.

    Builders returned by :meth:`get_style` are copies, so callers can keep
    configuring them without touching the preset.

    Usage::

        sm = StyleManager("academic")
        heading = sm.get_heading(1).build("Introduction")
        note = sm.get_style("footnote").color(text=RED).build("1")
    """

    PRESETS = list(_PRESET_BUILDERS.keys())

    def __init__(self, preset: str = "default") -> None:
        if preset not in _PRESET_BUILDERS:
            raise ValueError(
                f"Unknown preset {preset!r}. Choose from: {', '.join(_PRESET_BUILDERS)}"
            )
        self.preset = preset
        self._styles: dict[str, AttributedBuilder] = {}
        self._load_preset(preset)

    # -- public API ---------------------------------------------------------

    def get_style(self, name: str) -> AttributedBuilder:
        """Get a copy of the style registered under *name*.

        Every preset defines the names in :data:`STYLE_NAMES`.
        Falls back to ``body`` for unknown names.
        """
        if name not in self._styles:
            logger.debug("Unknown style %r in preset %r, using body", name, self.preset)
        return self._styles.get(name, self._styles["body"]).copy()

    def get_heading(self, level: int) -> AttributedBuilder:
        """Return the heading style for level *1--6* (clamped)."""
        level = max(1, min(6, level))
        return self.get_style(f"heading_{level}")

    def get_body(self) -> AttributedBuilder:
        return self.get_style("body")

    def has_style(self, name: str) -> bool:
        return name in self._styles

    def list_style_names(self) -> list[str]:
        """Return all available style names in this preset."""
        return sorted(self._styles.keys())

    # -- internals ----------------------------------------------------------

    def _load_preset(self, preset: str) -> None:
        builder = _PRESET_BUILDERS[preset]
        self._styles = builder()
        logger.debug("Loaded preset %r with %d styles", preset, len(self._styles))
