"""Exception types raised by the swatch picker engine."""

from __future__ import annotations

from typing import Any


class SwatchPickerError(Exception):
    """Base class for all swatch picker errors."""


class UnknownPresetError(SwatchPickerError, KeyError):
    """A preset name was not found in the registry."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        message = f"Unknown preset: {name!r}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidColorsInputError(SwatchPickerError, TypeError):
    """The colors option is not a name, a flat list, a grid, or a preset mapping."""

    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        message = f"Invalid colors input of type {type(value).__name__}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigError(SwatchPickerError, ValueError):
    """An option value is out of range or of the wrong kind."""
