"""Picker options.

``SwatchesConfig`` holds every recognized option with its default. It can be
built from keyword arguments, from a dict using either snake_case or the
camelCase spellings common in front-end configs, or from a JSON file.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

from swatch_picker.core.errors import ConfigError
from swatch_picker.core.length import parse_count, parse_length
from swatch_picker.engine.exceptions import ExceptionMode
from swatch_picker.engine.layout import DEFAULT_TRIGGER_SIZE, SHAPES, LayoutFields

POPOVER_SIDES = ("left", "right")

_ALIASES = {
    "exceptionMode": "exception_mode",
    "closeOnSelect": "close_on_select",
    "maxHeight": "max_height",
    "swatchSize": "swatch_size",
    "spacingSize": "spacing_size",
    "borderRadius": "border_radius",
    "rowLength": "row_length",
    "backgroundColor": "background_color",
    "popoverTo": "popover_to",
    "showBorder": "show_border",
    "triggerSize": "trigger_size",
    # Older configs spell the option in the singular
    "shape": "shapes",
}

_SIZE_FIELDS = ("max_height", "swatch_size", "spacing_size")


@dataclass(frozen=True)
class SwatchesConfig:
    """All options understood by the picker."""

    # What to show
    colors: Any = None
    exceptions: tuple[str, ...] = ()
    exception_mode: ExceptionMode = ExceptionMode.DISABLED

    # Behavior
    inline: bool = False
    close_on_select: bool = True
    disabled: bool = False
    value: Optional[str] = None

    # Explicit layout tier (None = not set)
    max_height: Optional[int] = None
    swatch_size: Optional[int] = None
    spacing_size: Optional[int] = None
    border_radius: Optional[Union[int, str]] = None
    row_length: Optional[int] = None
    show_border: Optional[bool] = None

    # Presentation
    background_color: str = "#ffffff"
    shapes: str = "squares"
    popover_to: str = "right"
    trigger_size: int = DEFAULT_TRIGGER_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.exceptions, str):
            raise ConfigError("exceptions must be a sequence of colors, not a single string")
        exceptions = tuple(self.exceptions or ())
        for color in exceptions:
            if not isinstance(color, str):
                raise ConfigError(f"exceptions must contain color strings, got {color!r}")
        object.__setattr__(self, "exceptions", exceptions)
        object.__setattr__(self, "exception_mode", ExceptionMode.parse(self.exception_mode))

        if self.shapes not in SHAPES:
            raise ConfigError(f"shapes must be one of {SHAPES}, got {self.shapes!r}")
        if self.popover_to not in POPOVER_SIDES:
            raise ConfigError(f"popover_to must be one of {POPOVER_SIDES}, got {self.popover_to!r}")

        # Lengths may arrive as strings ("18", "18px") from front-end configs
        for name in _SIZE_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            length = parse_length(value)
            if length is None:
                raise ConfigError(f"{name} must be a non-negative length, got {value!r}")
            object.__setattr__(self, name, length)
        if self.row_length is not None:
            count = parse_count(self.row_length)
            if count is None:
                raise ConfigError(f"row_length must be a positive integer, got {self.row_length!r}")
            object.__setattr__(self, "row_length", count)
        trigger_size = parse_length(self.trigger_size)
        if not trigger_size:
            raise ConfigError(f"trigger_size must be positive, got {self.trigger_size!r}")
        object.__setattr__(self, "trigger_size", trigger_size)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SwatchesConfig:
        """Build a config from a dict; camelCase keys are accepted."""
        return cls(**_canonical_keys(data))

    def replace(self, **changes: Any) -> SwatchesConfig:
        """Return a validated copy with ``changes`` applied."""
        return dataclasses.replace(self, **_canonical_keys(changes))

    def explicit_layout(self) -> LayoutFields:
        """The layout values set directly on this config."""
        return LayoutFields(
            swatch_size=self.swatch_size,
            spacing_size=self.spacing_size,
            border_radius=self.border_radius,
            max_height=self.max_height,
            row_length=self.row_length,
            show_border=self.show_border,
        )


def load_config(path: Union[str, Path]) -> SwatchesConfig:
    """
    Load a picker config from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or is
            not a JSON object
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"{path}: cannot read config ({e.strerror or e})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return SwatchesConfig.from_mapping(data)


def _canonical_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(SwatchesConfig)}
    result: dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise ConfigError(f"Unknown option: {key!r}")
        result[name] = value
    return result
