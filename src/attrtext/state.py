"""Typed record of every style property a builder can carry."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

from attrtext.values import (
    Color,
    Font,
    LineBreakMode,
    LineStyleValue,
    Shadow,
    Size,
    TextAlignment,
)

# Fields that end up in the single paragraph descriptor rather than as
# run attributes.
PARAGRAPH_FIELDS = (
    "text_alignment",
    "line_break_mode",
    "minimum_line_height",
    "maximum_line_height",
    "line_spacing",
)


@dataclass
class StyleState:
    """Current value of every style property.

    All properties are optional; ``None`` means "not set" and contributes
    nothing to a built document.  Assigning any of the paragraph fields
    marks the paragraph style as modified.

    Example:
        >>> state = StyleState(text_color=RED)
        >>> state.is_paragraph_style_modified
        False
        >>> state.line_spacing = 4.0
        >>> state.is_paragraph_style_modified
        True
    """

    # Run level
    is_uppercased: bool = False
    text_color: Optional[Color] = None
    background_color: Optional[Color] = None
    shadow_color: Optional[Color] = None
    shadow_offset: Optional[Size] = None
    shadow_blur_radius: Optional[float] = None
    strikethrough_style: Optional[LineStyleValue] = None
    strikethrough_color: Optional[Color] = None
    underline_style: Optional[LineStyleValue] = None
    underline_color: Optional[Color] = None
    letter_spacing: Optional[float] = None
    font: Optional[Font] = None
    baseline_offset: Optional[float] = None

    # Paragraph level
    text_alignment: Optional[TextAlignment] = None
    line_break_mode: Optional[LineBreakMode] = None
    minimum_line_height: Optional[float] = None
    maximum_line_height: Optional[float] = None
    line_spacing: Optional[float] = None

    is_paragraph_style_modified: bool = False

    def __post_init__(self) -> None:
        # Paragraph values passed to the constructor count as modifications.
        if any(getattr(self, name) is not None for name in PARAGRAPH_FIELDS):
            self.is_paragraph_style_modified = True

    def __setattr__(self, name: str, value: object) -> None:
        super().__setattr__(name, value)
        if name in PARAGRAPH_FIELDS:
            super().__setattr__("is_paragraph_style_modified", True)

    @property
    def shadow(self) -> Optional[Shadow]:
        """Composite shadow, present only once offset and blur are both set."""
        if self.shadow_offset is None or self.shadow_blur_radius is None:
            return None
        return Shadow(
            offset=self.shadow_offset,
            blur_radius=self.shadow_blur_radius,
            color=self.shadow_color,
        )

    def paragraph_values(self) -> dict[str, object]:
        """Return the paragraph fields that have been set."""
        return {
            name: getattr(self, name)
            for name in PARAGRAPH_FIELDS
            if getattr(self, name) is not None
        }

    def set_fields(self) -> list[str]:
        """Names of all fields holding a non-default value."""
        return [
            f.name for f in fields(self)
            if getattr(self, f.name) != f.default
        ]
