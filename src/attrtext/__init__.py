"""Typed builders for attributed (styled) text."""

from attrtext.builder import AttributedBuilder, StaticAttributedBuilder
from attrtext.document import AttributeKey, StyledTextDocument, TextRange
from attrtext.strings import attributed_builder, style, with_attributes
from attrtext.values import (
    Color,
    Font,
    LineBreakMode,
    ParagraphStyle,
    Shadow,
    Size,
    TextAlignment,
    UnderlineStyle,
)

__version__ = "0.1.0"

__all__ = [
    "AttributeKey",
    "AttributedBuilder",
    "Color",
    "Font",
    "LineBreakMode",
    "ParagraphStyle",
    "Shadow",
    "Size",
    "StaticAttributedBuilder",
    "StyledTextDocument",
    "TextAlignment",
    "TextRange",
    "UnderlineStyle",
    "attributed_builder",
    "style",
    "with_attributes",
]
