"""Public attributed text builders.

Two flavours share the same setters:

* :class:`StaticAttributedBuilder` is bound to one string at construction
  and builds it with ``build()``.
* :class:`AttributedBuilder` holds only style and takes the string on each
  ``build(text)`` call, so one configured style can be stamped onto many
  strings.

Usage::

    builder = StaticAttributedBuilder("Hello world")
    builder.color(text=RED).letter_spacing(2)
    doc = builder.build()

    style = AttributedBuilder().color(text=RED)
    first = style.build("Hello")
    style.letter_spacing(2)
    second = style.build("world")

If a setter is called more than once, only the last call takes effect.
"""

from __future__ import annotations

from typing import Optional

from attrtext.accumulator import AttributeAccumulator, CloneableMixin, StyleSettersMixin
from attrtext.document import StyledTextDocument


class StaticAttributedBuilder(StyleSettersMixin, CloneableMixin):
    """Builder bound to a fixed string."""

    def __init__(self, text: str, *, _core: Optional[AttributeAccumulator] = None) -> None:
        self._text = text
        self._core = _core if _core is not None else AttributeAccumulator()

    @property
    def text(self) -> str:
        return self._text

    def build(self) -> StyledTextDocument:
        return self._core.materialize(self._text)

    def _clone(self) -> StaticAttributedBuilder:
        return StaticAttributedBuilder(self._text, _core=self._core.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticAttributedBuilder):
            return NotImplemented
        return self._text == other._text and self._core == other._core

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StaticAttributedBuilder(text={self._text!r}, set={self._core.state.set_fields()})"


class AttributedBuilder(StyleSettersMixin, CloneableMixin):
    """Builder holding only style; the string is given to :meth:`build`."""

    def __init__(self, *, _core: Optional[AttributeAccumulator] = None) -> None:
        self._core = _core if _core is not None else AttributeAccumulator()

    def build(self, text: str) -> StyledTextDocument:
        return self._core.materialize(text)

    def _clone(self) -> AttributedBuilder:
        return AttributedBuilder(_core=self._core.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributedBuilder):
            return NotImplemented
        return self._core == other._core

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AttributedBuilder(set={self._core.state.set_fields()})"
