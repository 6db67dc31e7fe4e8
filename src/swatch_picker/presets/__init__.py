"""Swatch presets: definitions, registry, and the built-in catalog."""

from swatch_picker.presets.registry import PresetDefinition, PresetRegistry
from swatch_picker.presets.catalog import PRESETS, default_registry, list_presets

__all__ = [
    "PresetDefinition",
    "PresetRegistry",
    "PRESETS",
    "default_registry",
    "list_presets",
]
