"""Shortcuts for styling plain strings.

Usage::

    doc = attributed_builder("Hello world").color(text=RED).build()

    doc = with_attributes("Hello", builder)

    doc = style("Hello world", lambda b: b.color(text=RED).font(LABEL_FONT))
"""

from __future__ import annotations

from typing import Callable

from attrtext.builder import AttributedBuilder, StaticAttributedBuilder
from attrtext.document import StyledTextDocument


def attributed_builder(text: str) -> StaticAttributedBuilder:
    """Return a fresh builder bound to *text*."""
    return StaticAttributedBuilder(text)


def with_attributes(text: str, builder: AttributedBuilder) -> StyledTextDocument:
    """Apply the style configured on *builder* to *text*."""
    return builder.build(text)


def style(text: str, configure: Callable[[StaticAttributedBuilder], object]) -> StyledTextDocument:
    """Configure a builder bound to *text* inside *configure* and build it.

    The return value of *configure* is ignored, so both chained lambdas
    and multi-statement functions work.
    """
    builder = attributed_builder(text)
    configure(builder)
    return builder.build()
