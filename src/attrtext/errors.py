"""
Exception classes for the attrtext package.

The builders themselves never raise: every combination of style values is
accepted.  These errors come from the layers that turn loosely typed input
(command-line flags, form fields, option mappings) into builder calls.
"""

from typing import Any, Optional


class AttrTextError(Exception):
    """Base exception for all attrtext errors."""

    pass


class StyleOptionError(AttrTextError):
    """Raised when a style option cannot be turned into a setter call.

    Attributes:
        option: Name of the offending option
        value: The value that was supplied
        reason: Why the option was rejected
        choices: Accepted values, when the option has a fixed set
    """

    def __init__(
        self,
        option: str,
        value: Any,
        reason: str,
        choices: Optional[list[str]] = None,
    ) -> None:
        self.option = option
        self.value = value
        self.reason = reason
        self.choices = choices or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Invalid value {self.value!r} for option '{self.option}': {self.reason}"
        if self.choices:
            msg += f" (choose from: {', '.join(self.choices)})"
        return msg


class UnknownColorError(StyleOptionError):
    """Raised when a color is neither a hex code nor a known color name."""

    def __init__(self, option: str, value: Any, choices: Optional[list[str]] = None) -> None:
        super().__init__(option, value, "not a hex color or known color name", choices)
