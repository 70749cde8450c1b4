"""Paragraph descriptor composition."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from attrtext.state import StyleState
from attrtext.values import ParagraphStyle


def make_paragraph_style(state: StyleState) -> ParagraphStyle:
    """Build a :class:`ParagraphStyle` from the paragraph fields of *state*.

    Only fields that were set override the descriptor defaults; the rest
    keep the renderer's own behaviour (natural alignment, word wrapping,
    unbounded line heights).
    """
    return replace(ParagraphStyle(), **_descriptor_overrides(state))


def paragraph_style_if_modified(state: StyleState) -> Optional[ParagraphStyle]:
    """Return the paragraph descriptor, or ``None`` if no paragraph field was touched."""
    if not state.is_paragraph_style_modified:
        return None
    return make_paragraph_style(state)


def _descriptor_overrides(state: StyleState) -> dict[str, object]:
    values = state.paragraph_values()
    overrides: dict[str, object] = {}
    if "text_alignment" in values:
        overrides["alignment"] = values["text_alignment"]
    for name in ("line_break_mode", "minimum_line_height", "maximum_line_height", "line_spacing"):
        if name in values:
            overrides[name] = values[name]
    return overrides
