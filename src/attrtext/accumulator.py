"""Shared builder core: style storage, chainable setters and materialization.

:class:`AttributeAccumulator` owns a :class:`~attrtext.state.StyleState`
and turns it into a :class:`~attrtext.document.StyledTextDocument`.  The
public builders in :mod:`attrtext.builder` each hold one accumulator and
pick up their fluent setters from :class:`StyleSettersMixin`.

Builders are not thread-safe.  A builder must not be mutated from more
than one thread without external locking; the documents it produces are
immutable and may be shared freely.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Optional, TypeVar

from attrtext.document import AttributeKey, StyledTextDocument
from attrtext.paragraph import paragraph_style_if_modified
from attrtext.state import StyleState
from attrtext.values import (
    Color,
    Font,
    LineBreakMode,
    LineStyleValue,
    Size,
    TextAlignment,
    coerce_line_style,
)

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound="StyleSettersMixin")


class AttributeAccumulator:
    """Style state plus the algorithm that applies it to a string."""

    __slots__ = ("state",)

    def __init__(self, state: Optional[StyleState] = None) -> None:
        self.state = state if state is not None else StyleState()

    def copy(self) -> AttributeAccumulator:
        """Return an accumulator holding an independent copy of the state."""
        return AttributeAccumulator(deepcopy(self.state))

    def materialize(self, text: str) -> StyledTextDocument:
        """Apply the current style to *text* and return a new document.

        The uppercase transform runs first, so every attribute range is
        measured against the text that ends up in the document.  Building
        never modifies the state.
        """
        state = self.state
        output = text.upper() if state.is_uppercased else text
        attributes: dict[AttributeKey, Any] = {}

        if state.letter_spacing is not None:
            attributes[AttributeKey.KERN] = state.letter_spacing
        if state.text_color is not None:
            attributes[AttributeKey.FOREGROUND_COLOR] = state.text_color
        if state.background_color is not None:
            attributes[AttributeKey.BACKGROUND_COLOR] = state.background_color

        shadow = state.shadow
        if shadow is not None:
            attributes[AttributeKey.SHADOW] = shadow

        # A line color only matters alongside a line style.
        if state.strikethrough_style is not None:
            attributes[AttributeKey.STRIKETHROUGH_STYLE] = int(state.strikethrough_style)
            if state.strikethrough_color is not None:
                attributes[AttributeKey.STRIKETHROUGH_COLOR] = state.strikethrough_color
        if state.underline_style is not None:
            attributes[AttributeKey.UNDERLINE_STYLE] = int(state.underline_style)
            if state.underline_color is not None:
                attributes[AttributeKey.UNDERLINE_COLOR] = state.underline_color

        if state.font is not None:
            attributes[AttributeKey.FONT] = state.font
        if state.baseline_offset is not None:
            attributes[AttributeKey.BASELINE_OFFSET] = state.baseline_offset

        paragraph_style = paragraph_style_if_modified(state)
        if paragraph_style is not None:
            attributes[AttributeKey.PARAGRAPH_STYLE] = paragraph_style

        logger.debug(
            "Materialized %d chars with attributes: %s",
            len(output), ", ".join(k.value for k in attributes) or "none",
        )
        return StyledTextDocument(output, attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeAccumulator):
            return NotImplemented
        return self.state == other.state

    __hash__ = None  # type: ignore[assignment]


class StyleSettersMixin:
    """Chainable setters shared by both builder flavours.

    Each call overwrites the property it names and returns the builder
    itself.  Calling the same setter twice keeps only the last value.
    Values are not validated: negative spacing, odd line heights and raw
    style codes are all passed through to the renderer untouched.

    Keyword-grouped setters (:meth:`color`, :meth:`style`, :meth:`line`)
    accept several keywords at once; each one given is applied
    independently and omitted ones are left alone.
    """

    _core: AttributeAccumulator

    # -- colors -------------------------------------------------------------

    def color(
        self: _B,
        *,
        text: Optional[Color] = None,
        background: Optional[Color] = None,
        strikethrough: Optional[Color] = None,
        underline: Optional[Color] = None,
        shadow: Optional[Color] = None,
    ) -> _B:
        """Set foreground, background, line or shadow colors."""
        state = self._core.state
        if text is not None:
            state.text_color = text
        if background is not None:
            state.background_color = background
        if strikethrough is not None:
            state.strikethrough_color = strikethrough
        if underline is not None:
            state.underline_color = underline
        if shadow is not None:
            state.shadow_color = shadow
        return self

    # -- run level ----------------------------------------------------------

    def letter_spacing(self: _B, spacing: float) -> _B:
        self._core.state.letter_spacing = spacing
        return self

    def style(
        self: _B,
        *,
        strikethrough: Optional[LineStyleValue] = None,
        underline: Optional[LineStyleValue] = None,
        uppercased: Optional[bool] = None,
    ) -> _B:
        """Set strikethrough/underline line styles or the uppercase transform.

        Line styles take an :class:`~attrtext.values.UnderlineStyle` or a raw
        integer.  Integers outside the known flag values are stored as-is
        and render in an unspecified way; they never cause an error here.
        """
        state = self._core.state
        if strikethrough is not None:
            state.strikethrough_style = coerce_line_style(strikethrough)
        if underline is not None:
            state.underline_style = coerce_line_style(underline)
        if uppercased is not None:
            state.is_uppercased = uppercased
        return self

    def font(self: _B, font: Font) -> _B:
        self._core.state.font = font
        return self

    def shadow(self: _B, offset: Size, blur_radius: float) -> _B:
        """Set the shadow geometry.  Color is set separately via ``color(shadow=...)``."""
        state = self._core.state
        state.shadow_offset = offset
        state.shadow_blur_radius = blur_radius
        return self

    # -- paragraph level ----------------------------------------------------

    def text_alignment(self: _B, alignment: TextAlignment) -> _B:
        self._core.state.text_alignment = alignment
        return self

    def line(
        self: _B,
        *,
        break_mode: Optional[LineBreakMode] = None,
        minimum_height: Optional[float] = None,
        maximum_height: Optional[float] = None,
        space: Optional[float] = None,
        base_offset: Optional[float] = None,
    ) -> _B:
        """Set line metrics.

        ``space`` is the leading between line fragments.  ``base_offset``
        shifts glyphs off the baseline and is a run attribute, not part of
        the paragraph descriptor.  Be careful combining ``maximum_height``
        with fonts that scale with user settings.
        """
        state = self._core.state
        if break_mode is not None:
            state.line_break_mode = break_mode
        if minimum_height is not None:
            state.minimum_line_height = minimum_height
        if maximum_height is not None:
            state.maximum_line_height = maximum_height
        if space is not None:
            state.line_spacing = space
        if base_offset is not None:
            state.baseline_offset = base_offset
        return self

    # -- introspection ------------------------------------------------------

    @property
    def state(self) -> StyleState:
        """A snapshot of the current style state."""
        return deepcopy(self._core.state)


class CloneableMixin:
    """Value-copy support: ``copy()``, ``copy.copy`` and ``copy.deepcopy``.

    Subclasses implement ``_clone`` to return a new builder around an
    independent accumulator.
    """

    def _clone(self):
        raise NotImplementedError

    def copy(self):
        """Return an independent builder with the same current style."""
        return self._clone()

    def __copy__(self):
        return self._clone()

    def __deepcopy__(self, memo: dict) -> Any:
        return self._clone()
