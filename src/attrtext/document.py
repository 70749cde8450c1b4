"""Immutable styled text produced by the builders."""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from attrtext.values import Color


class AttributeKey(Enum):
    """Keys of the attributes a document can carry."""

    KERN = "kern"
    FOREGROUND_COLOR = "foreground_color"
    BACKGROUND_COLOR = "background_color"
    SHADOW = "shadow"
    STRIKETHROUGH_STYLE = "strikethrough_style"
    STRIKETHROUGH_COLOR = "strikethrough_color"
    UNDERLINE_STYLE = "underline_style"
    UNDERLINE_COLOR = "underline_color"
    FONT = "font"
    BASELINE_OFFSET = "baseline_offset"
    PARAGRAPH_STYLE = "paragraph_style"


@dataclass(frozen=True)
class TextRange:
    """Half-open character range ``[location, location + length)``."""

    location: int
    length: int

    @property
    def end(self) -> int:
        return self.location + self.length

    def to_list(self) -> list[int]:
        return [self.location, self.length]


class StyledTextDocument:
    """Text paired with attributes that span the whole of it.

    Documents are read-only once constructed.  Two documents are equal
    when their text and attribute sets are equal, regardless of the order
    the attributes were added in.

    Usage::

        doc = AttributedBuilder().color(text=RED).build("Hello World")
        doc.text                                  # 'Hello World'
        doc[AttributeKey.FOREGROUND_COLOR]        # Color(255, 0, 0, 255)
        doc.attribute_range(AttributeKey.FOREGROUND_COLOR)  # TextRange(0, 11)
    """

    __slots__ = ("_text", "_attributes")

    def __init__(self, text: str, attributes: Optional[Mapping[AttributeKey, Any]] = None) -> None:
        object.__setattr__(self, "_text", text)
        object.__setattr__(self, "_attributes", dict(attributes or {}))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- accessors ----------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def full_range(self) -> TextRange:
        return TextRange(0, len(self._text))

    @property
    def attributes(self) -> Mapping[AttributeKey, Any]:
        """Read-only view of the attribute values."""
        return MappingProxyType(self._attributes)

    def attribute(self, key: AttributeKey) -> Any:
        """Return the value stored under *key*, or ``None``."""
        return self._attributes.get(key)

    def attribute_range(self, key: AttributeKey) -> Optional[TextRange]:
        """Return the range *key* applies to, or ``None`` if it is absent."""
        if key not in self._attributes:
            return None
        return self.full_range

    def runs(self) -> Iterator[tuple[AttributeKey, Any, TextRange]]:
        """Yield ``(key, value, range)`` for every attribute, sorted by key."""
        span = self.full_range
        for key in sorted(self._attributes, key=lambda k: k.value):
            yield key, self._attributes[key], span

    # -- dunder -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __getitem__(self, key: AttributeKey) -> Any:
        return self._attributes[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledTextDocument):
            return NotImplemented
        return self._text == other._text and self._attributes == other._attributes

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self):
        return (type(self), (self._text, self._attributes))

    def __repr__(self) -> str:
        keys = ", ".join(k.value for k, _, _ in self.runs())
        return f"<StyledTextDocument text={self._text!r} attributes=[{keys}]>"

    # -- serialisation ------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the document."""
        return {
            "text": self._text,
            "length": len(self._text),
            "attributes": [
                {"key": key.value, "value": _serialize(value), "range": span.to_list()}
                for key, value, span in self.runs()
            ],
        }


def _serialize(value: Any) -> Any:
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, Color):
        return value.to_hex()
    if isinstance(value, Enum):
        return value.name.lower()
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return value
    if is_dataclass(value):
        return {f.name: _serialize(getattr(value, f.name)) for f in fields(value)}
    return repr(value)
