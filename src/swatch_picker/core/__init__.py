"""Core color handling, length parsing, and error types."""

from swatch_picker.core.color import normalize, equivalent, to_rgb, is_light
from swatch_picker.core.errors import (
    SwatchPickerError,
    UnknownPresetError,
    InvalidColorsInputError,
    ConfigError,
)
from swatch_picker.core.length import parse_length, parse_count

__all__ = [
    "normalize",
    "equivalent",
    "to_rgb",
    "is_light",
    "parse_length",
    "parse_count",
    "SwatchPickerError",
    "UnknownPresetError",
    "InvalidColorsInputError",
    "ConfigError",
]
