"""Preset definitions and the read-only registry that serves them."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Optional, Union

from swatch_picker.core.errors import InvalidColorsInputError, UnknownPresetError
from swatch_picker.core.length import parse_count, parse_length

FlatSwatches = tuple[str, ...]
NestedSwatches = tuple[tuple[str, ...], ...]
Swatches = Union[FlatSwatches, NestedSwatches]

# camelCase spellings accepted when a preset arrives as plain data
_FIELD_ALIASES = {
    "borderRadius": "border_radius",
    "rowLength": "row_length",
    "swatchSize": "swatch_size",
    "spacingSize": "spacing_size",
    "maxHeight": "max_height",
    "showBorder": "show_border",
}


@dataclass(frozen=True)
class PresetDefinition:
    """
    A named bundle of swatches plus optional layout defaults.

    ``swatches`` is either a flat tuple of color tokens or a tuple of rows.
    Every other field is optional and feeds the preset tier of the layout.
    """
    swatches: Swatches
    border_radius: Optional[Union[int, str]] = None
    row_length: Optional[int] = None
    swatch_size: Optional[int] = None
    spacing_size: Optional[int] = None
    max_height: Optional[int] = None
    show_border: Optional[bool] = None

    def __post_init__(self) -> None:
        for name in ("swatch_size", "spacing_size", "max_height"):
            value = getattr(self, name)
            if value is None:
                continue
            length = parse_length(value)
            if length is None:
                raise InvalidColorsInputError(value, f"preset {name} must be a non-negative length")
            object.__setattr__(self, name, length)
        if self.row_length is not None:
            count = parse_count(self.row_length)
            if count is None:
                raise InvalidColorsInputError(self.row_length, "preset row_length must be a positive integer")
            object.__setattr__(self, "row_length", count)
        if self.border_radius is not None and (
                isinstance(self.border_radius, bool)
                or not isinstance(self.border_radius, (int, float, str))):
            raise InvalidColorsInputError(self.border_radius, "preset border_radius must be a number or a string")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PresetDefinition:
        """Build a definition from a dict using camelCase or snake_case keys."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _FIELD_ALIASES.get(key, key)
            if name not in known:
                raise InvalidColorsInputError(data, f"unexpected preset field {key!r}")
            kwargs[name] = value

        if "swatches" not in kwargs:
            raise InvalidColorsInputError(data, "preset mapping has no 'swatches'")
        kwargs["swatches"] = _freeze(kwargs["swatches"])
        return cls(**kwargs)

    def layout_fields(self) -> dict[str, Any]:
        """Non-swatch fields that the preset actually sets."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "swatches" and getattr(self, f.name) is not None
        }

    @property
    def swatch_count(self) -> int:
        return sum(
            len(item) if isinstance(item, tuple) else 1
            for item in self.swatches
        )


def _freeze(swatches: Any) -> Any:
    """Turn nested lists into tuples; anything else is left for the resolver to reject."""
    if isinstance(swatches, (list, tuple)):
        return tuple(_freeze(item) if isinstance(item, (list, tuple)) else item
                     for item in swatches)
    return swatches


class PresetRegistry:
    """
    Read-only name -> PresetDefinition lookup.

    Names are matched case-insensitively. The registry never hands out a
    mutable view of its catalog.
    """

    def __init__(self, presets: Mapping[str, Union[PresetDefinition, Mapping[str, Any]]]):
        catalog: dict[str, PresetDefinition] = {}
        for name, preset in presets.items():
            if not isinstance(preset, PresetDefinition):
                preset = PresetDefinition.from_mapping(preset)
            catalog[name.strip().lower()] = preset
        self._presets = MappingProxyType(catalog)

    def lookup(self, name: str) -> Optional[PresetDefinition]:
        """Get a preset by name, or None if it is not registered."""
        return self._presets.get(name.strip().lower())

    def get(self, name: str) -> PresetDefinition:
        """Get a preset by name, raising UnknownPresetError if absent."""
        preset = self.lookup(name)
        if preset is None:
            raise UnknownPresetError(name, self.names())
        return preset

    def names(self) -> tuple[str, ...]:
        return tuple(self._presets)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._presets)

    def __len__(self) -> int:
        return len(self._presets)
