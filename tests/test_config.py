"""Tests for option parsing, presets and string shortcuts."""

from __future__ import annotations

import pytest

from attrtext.builder import AttributedBuilder, StaticAttributedBuilder
from attrtext.config import builder_from_options, parse_color, parse_line_style
from attrtext.document import AttributeKey
from attrtext.errors import AttrTextError, StyleOptionError, UnknownColorError
from attrtext.strings import attributed_builder, style, with_attributes
from attrtext.style_manager import STYLE_NAMES, StyleManager
from attrtext.values import (
    BLUE,
    RED,
    Color,
    Font,
    LineBreakMode,
    Shadow,
    Size,
    TextAlignment,
    UnderlineStyle,
)


# ---------------------------------------------------------------------------
# builder_from_options
# ---------------------------------------------------------------------------

class TestBuilderFromOptions:

    def test_empty_options(self) -> None:
        assert builder_from_options({}) == AttributedBuilder()

    def test_none_values_skipped(self) -> None:
        assert builder_from_options({"color": None, "align": None}) == AttributedBuilder()

    def test_colors(self) -> None:
        b = builder_from_options({"color": "red", "background": "#0000ff"})
        assert b == AttributedBuilder().color(text=RED, background=BLUE)

    def test_font_and_size(self) -> None:
        b = builder_from_options({"font": "Arial", "font_size": "14"})
        assert b.build("x")[AttributeKey.FONT] == Font("Arial", 14.0)

    def test_font_size_only_keeps_base_family(self) -> None:
        base = AttributedBuilder().font(Font("Menlo", 9.0))
        b = builder_from_options({"font_size": 20}, base=base)
        assert b.build("x")[AttributeKey.FONT] == Font("Menlo", 20.0)

    def test_paragraph_options(self) -> None:
        b = builder_from_options({
            "align": "Center",
            "line_break": "truncating-tail",
            "line_spacing": 2,
        })
        expected = (
            AttributedBuilder()
            .text_alignment(TextAlignment.CENTER)
            .line(break_mode=LineBreakMode.TRUNCATING_TAIL, space=2.0)
        )
        assert b == expected

    def test_shadow(self) -> None:
        b = builder_from_options({"shadow_offset": "1,2", "shadow_blur": 3, "shadow_color": "black"})
        assert b.build("x")[AttributeKey.SHADOW] == Shadow(Size(1.0, 2.0), 3.0, Color(0, 0, 0))

    def test_shadow_needs_both_parts(self) -> None:
        with pytest.raises(StyleOptionError, match="shadow_blur"):
            builder_from_options({"shadow_offset": "1,2"})

    def test_uppercase_string(self) -> None:
        doc = builder_from_options({"uppercase": "yes"}).build("abc")
        assert doc.text == "ABC"

    def test_underline_names(self) -> None:
        doc = builder_from_options({"underline": "single|pattern_dot", "underline_color": "blue"}).build("a")
        assert doc[AttributeKey.UNDERLINE_STYLE] == 0x0101
        assert doc[AttributeKey.UNDERLINE_COLOR] == BLUE

    def test_base_not_mutated(self) -> None:
        base = AttributedBuilder().color(text=RED)
        builder_from_options({"color": "blue"}, base=base)
        assert base.build("x")[AttributeKey.FOREGROUND_COLOR] == RED

    def test_unknown_option(self) -> None:
        with pytest.raises(StyleOptionError, match="unknown option"):
            builder_from_options({"colour": "red"})

    @pytest.mark.parametrize(
        "options",
        [
            {"letter_spacing": "wide"},
            {"align": "sideways"},
            {"uppercase": "maybe"},
            {"shadow_offset": "1", "shadow_blur": 1},
            {"font_size": True},
        ],
    )
    def test_invalid_values(self, options: dict) -> None:
        with pytest.raises(AttrTextError):
            builder_from_options(options)


class TestParsers:

    def test_unknown_color(self) -> None:
        with pytest.raises(UnknownColorError) as excinfo:
            parse_color("color", "mauve")
        assert excinfo.value.option == "color"
        assert "red" in excinfo.value.choices
        assert "mauve" in str(excinfo.value)

    def test_color_passthrough(self) -> None:
        assert parse_color("color", RED) is RED

    def test_raw_line_style(self) -> None:
        assert parse_line_style("underline", "513") == 513
        assert parse_line_style("underline", 7) == 7

    def test_enum_error_lists_choices(self) -> None:
        with pytest.raises(StyleOptionError) as excinfo:
            builder_from_options({"line_break": "nope"})
        assert "word_wrapping" in str(excinfo.value)


# ---------------------------------------------------------------------------
# StyleManager
# ---------------------------------------------------------------------------

class TestStyleManager:

    def test_default_preset(self) -> None:
        assert StyleManager().preset == "default"

    def test_invalid_preset_raises(self) -> None:
        with pytest.raises(ValueError):
            StyleManager("nonexistent")

    @pytest.mark.parametrize("preset", StyleManager.PRESETS)
    def test_all_presets_build(self, preset: str) -> None:
        sm = StyleManager(preset)
        for name in sm.list_style_names():
            doc = sm.get_style(name).build("Sample")
            assert AttributeKey.FONT in doc

    def test_style_names(self) -> None:
        names = StyleManager().list_style_names()
        assert names == sorted(names)
        assert {"body", "heading_1", "heading_6", "link", "code"} <= set(names)

    @pytest.mark.parametrize("preset", StyleManager.PRESETS)
    def test_every_preset_defines_style_names(self, preset: str) -> None:
        assert StyleManager(preset).list_style_names() == list(STYLE_NAMES)

    def test_unknown_style_falls_back_to_body(self) -> None:
        sm = StyleManager()
        assert sm.get_style("nope") == sm.get_body()

    def test_heading_level_clamped(self) -> None:
        sm = StyleManager()
        assert sm.get_heading(0) == sm.get_style("heading_1")
        assert sm.get_heading(99) == sm.get_style("heading_6")

    def test_headings_get_larger(self) -> None:
        sm = StyleManager()
        h1 = sm.get_heading(1).build("x")[AttributeKey.FONT]
        h3 = sm.get_heading(3).build("x")[AttributeKey.FONT]
        assert h1.size > h3.size

    def test_get_style_returns_copy(self) -> None:
        sm = StyleManager()
        sm.get_style("body").color(text=RED)
        assert sm.get_style("body").build("x")[AttributeKey.FOREGROUND_COLOR] != RED

    def test_link_is_underlined(self) -> None:
        doc = StyleManager().get_style("link").build("here")
        assert doc[AttributeKey.UNDERLINE_STYLE] == UnderlineStyle.SINGLE
        assert doc[AttributeKey.UNDERLINE_COLOR] == BLUE

    def test_business_heading_uppercased(self) -> None:
        doc = StyleManager("business").get_heading(1).build("Quarterly")
        assert doc.text == "QUARTERLY"


# ---------------------------------------------------------------------------
# String shortcuts
# ---------------------------------------------------------------------------

class TestStringShortcuts:

    def test_attributed_builder(self) -> None:
        b = attributed_builder("Hello")
        assert isinstance(b, StaticAttributedBuilder)
        assert b.build().text == "Hello"

    def test_with_attributes(self) -> None:
        b = AttributedBuilder().color(text=RED)
        assert with_attributes("Hello", b) == b.build("Hello")

    def test_style_block(self) -> None:
        doc = style("Hello world", lambda b: b.color(text=RED).letter_spacing(2))
        assert doc.text == "Hello world"
        assert doc[AttributeKey.FOREGROUND_COLOR] == RED
        assert doc[AttributeKey.KERN] == 2

    def test_style_block_function(self) -> None:
        def configure(builder: StaticAttributedBuilder) -> None:
            builder.style(uppercased=True)
            builder.text_alignment(TextAlignment.RIGHT)

        doc = style("abc", configure)
        assert doc.text == "ABC"
        assert AttributeKey.PARAGRAPH_STYLE in doc
