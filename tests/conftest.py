"""Shared fixtures: a small preset registry and sample color inputs."""

import pytest

from swatch_picker.presets.registry import PresetDefinition, PresetRegistry


# Mirrors the shape of a fully specified preset as front-end configs write it
COMPLETE_PRESET = {
    "swatches": ["#cc4125", "#e06666", "#f6b26b", "#ffd966", "#93c47d",
                 "#76a5af", "#6d9eeb", "#6fa8dc", "#8e7cc3", "#c27ba0"],
    "borderRadius": "0",
    "rowLength": 6,
    "swatchSize": 18,
    "spacingSize": 90,
    "maxHeight": 80,
}

FLAT_COLORS = ["#e31432", "#a156e2", "#eca23e"]

NESTED_COLORS = [
    ["#e31432", "#a156e2", "#eca23e"],
    ["#a2341e", "$ef86ff", "#eiaea3"],
    ["#eec451", "$3321de", "#166002"],
]


@pytest.fixture
def registry() -> PresetRegistry:
    """Registry with one preset per swatch shape, plus the default name."""
    return PresetRegistry({
        "simple": PresetDefinition(swatches=("#111111", "#222222", "#333333"), row_length=2),
        "flat": PresetDefinition(swatches=("#aa0000", "#00aa00", "#0000aa", "#aaaaaa")),
        "rows": PresetDefinition(
            swatches=(("#aa0000", "#00aa00"), ("#0000aa",)),
            swatch_size=30,
            max_height=120,
        ),
        "complete": COMPLETE_PRESET,
    })


@pytest.fixture
def complete_preset() -> dict:
    return dict(COMPLETE_PRESET)
