"""Turn the ``colors`` option into a uniform grid of rows.

The option comes in one of a few shapes. ``classify`` maps it onto exactly
one input variant and rejects everything else; ``resolve`` then expands the
variant into rows, consulting the preset registry where needed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union

from swatch_picker.core.errors import InvalidColorsInputError, UnknownPresetError
from swatch_picker.engine.layout import LayoutFields
from swatch_picker.presets.registry import PresetDefinition

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "simple"

ColorGrid = tuple[tuple[str, ...], ...]


class PresetLookup(Protocol):
    """Anything that can resolve a preset name."""

    def lookup(self, name: str) -> Optional[PresetDefinition]:
        ...


# -----------------------------------------------------------------------------
# Input variants
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PresetName:
    name: str


@dataclass(frozen=True)
class FlatColors:
    colors: tuple[str, ...]


@dataclass(frozen=True)
class NestedColors:
    rows: ColorGrid


@dataclass(frozen=True)
class InlinePreset:
    preset: PresetDefinition


@dataclass(frozen=True)
class DefaultColors:
    pass


ColorsInput = Union[PresetName, FlatColors, NestedColors, InlinePreset, DefaultColors]


@dataclass(frozen=True)
class Resolution:
    """Result of resolving the colors option."""
    grid: ColorGrid
    preset_layout: LayoutFields = field(default_factory=LayoutFields)
    preset_name: Optional[str] = None

    def flat(self) -> tuple[str, ...]:
        """All tokens in row-major order."""
        return tuple(token for row in self.grid for token in row)


def classify(colors: Any) -> ColorsInput:
    """
    Decide which input variant ``colors`` is.

    Raises:
        InvalidColorsInputError: For anything that is not a preset name,
            a flat sequence of tokens, a sequence of token rows, or a
            preset-shaped mapping
    """
    if colors is None:
        return DefaultColors()
    if isinstance(colors, str):
        name = colors.strip()
        if not name:
            raise InvalidColorsInputError(colors, "empty preset name")
        return PresetName(name)
    if isinstance(colors, PresetDefinition):
        return InlinePreset(colors)
    if isinstance(colors, Mapping):
        return InlinePreset(PresetDefinition.from_mapping(colors))
    if isinstance(colors, (list, tuple)):
        return _classify_sequence(colors)
    raise InvalidColorsInputError(colors)


def _classify_sequence(items: Union[list, tuple]) -> Union[FlatColors, NestedColors]:
    if all(isinstance(item, str) for item in items):
        return FlatColors(tuple(items))
    if all(isinstance(item, (list, tuple)) for item in items):
        rows = []
        for row in items:
            if not all(isinstance(token, str) for token in row):
                raise InvalidColorsInputError(items, "rows must contain only color strings")
            rows.append(tuple(row))
        return NestedColors(tuple(rows))
    raise InvalidColorsInputError(items, "mixes color strings with rows")


def resolve(
    colors: Any,
    registry: PresetLookup,
    row_length: Optional[int] = None,
) -> Resolution:
    """
    Resolve the colors option into a grid plus preset layout values.

    Args:
        colors: Preset name, flat list, list of rows, preset mapping, or None
        registry: Preset lookup used for names (and the default)
        row_length: Explicit row length; overrides a preset's own when
            re-chunking a flat list

    Raises:
        UnknownPresetError: If a name is not in the registry
        InvalidColorsInputError: If ``colors`` (or a preset's swatches)
            has an unsupported shape
    """
    variant = classify(colors)

    if isinstance(variant, DefaultColors):
        logger.debug("No colors given, using preset %r", DEFAULT_PRESET)
        variant = PresetName(DEFAULT_PRESET)

    preset_name: Optional[str] = None
    if isinstance(variant, PresetName):
        preset = registry.lookup(variant.name)
        if preset is None:
            names = getattr(registry, "names", None)
            raise UnknownPresetError(variant.name, tuple(names()) if callable(names) else ())
        preset_name = variant.name
        variant = InlinePreset(preset)

    if isinstance(variant, InlinePreset):
        preset = variant.preset
        preset_layout = LayoutFields.from_mapping(preset.layout_fields())
        if not isinstance(preset.swatches, (list, tuple)):
            raise InvalidColorsInputError(preset.swatches, "preset swatches must be a sequence")
        swatches = _classify_sequence(preset.swatches)
        effective_row_length = row_length if row_length is not None else preset.row_length
        grid = _to_grid(swatches, effective_row_length)
        logger.debug("Resolved preset %s into %d rows",
                     preset_name or "<inline>", len(grid))
        return Resolution(grid=grid, preset_layout=preset_layout, preset_name=preset_name)

    grid = _to_grid(variant, row_length)
    logger.debug("Resolved %s into %d rows", type(variant).__name__, len(grid))
    return Resolution(grid=grid)


def _to_grid(variant: Union[FlatColors, NestedColors], row_length: Optional[int]) -> ColorGrid:
    if isinstance(variant, NestedColors):
        return variant.rows
    return chunk(variant.colors, row_length)


def chunk(colors: tuple[str, ...], row_length: Optional[int]) -> ColorGrid:
    """Split a flat run of tokens into rows; the last row may be shorter."""
    if not colors:
        return ()
    if not row_length or row_length <= 0:
        return (colors,)
    return tuple(colors[i:i + row_length] for i in range(0, len(colors), row_length))
