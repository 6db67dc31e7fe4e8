"""
swatch-picker: color swatch picker engine

Resolve flexible color specifications into swatch grids, flag exception
colors, size the container, and drive popover visibility.

Quick Start:
    >>> import swatch_picker as sp
    >>> picker = sp.SwatchPicker(colors="material-simple", exceptions=["#F44336"])
    >>> [a.token for a in picker.grid[0]]
    ['#F44336', '#E91E63', '#9C27B0', '#673AB7', '#3F51B5']
    >>> picker.layout.max_height
    300

Features:
    - Colors as a preset name, flat list, list of rows, or preset mapping
    - Case- and notation-insensitive color matching (hex, CSS names, rgb())
    - Exception colors hidden or disabled wherever they appear
    - Explicit > preset > default layout precedence per field
    - Popover state machine with close-on-select and click-outside
    - Terminal and PNG renderers, plus an interactive CLI picker
"""

__version__ = "0.1.0"

# Core types
from swatch_picker.core.color import normalize, equivalent
from swatch_picker.core.errors import (
    SwatchPickerError,
    UnknownPresetError,
    InvalidColorsInputError,
    ConfigError,
)

# Presets
from swatch_picker.presets import PresetDefinition, PresetRegistry, default_registry

# Engine
from swatch_picker.engine import (
    Resolution,
    resolve,
    ExceptionMode,
    Disposition,
    SwatchAnnotation,
    annotate,
    LayoutFields,
    EffectiveLayout,
    compute_layout,
    PopoverState,
    PopoverStateMachine,
)

# Widget
from swatch_picker.config import SwatchesConfig, load_config
from swatch_picker.picker import SwatchPicker


def create(colors=None, **options) -> SwatchPicker:
    """Create a picker over the built-in presets."""
    return SwatchPicker(colors=colors, **options)


__all__ = [
    # Version
    "__version__",
    # Core
    "normalize",
    "equivalent",
    "SwatchPickerError",
    "UnknownPresetError",
    "InvalidColorsInputError",
    "ConfigError",
    # Presets
    "PresetDefinition",
    "PresetRegistry",
    "default_registry",
    # Engine
    "Resolution",
    "resolve",
    "ExceptionMode",
    "Disposition",
    "SwatchAnnotation",
    "annotate",
    "LayoutFields",
    "EffectiveLayout",
    "compute_layout",
    "PopoverState",
    "PopoverStateMachine",
    # Widget
    "SwatchesConfig",
    "load_config",
    "SwatchPicker",
    "create",
]
