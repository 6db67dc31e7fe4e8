"""Resolution, exception filtering, layout, and popover state."""

from swatch_picker.engine.resolver import (
    ColorGrid,
    Resolution,
    classify,
    resolve,
    DEFAULT_PRESET,
)
from swatch_picker.engine.exceptions import (
    ExceptionMode,
    Disposition,
    SwatchAnnotation,
    annotate,
    visible_rows,
)
from swatch_picker.engine.layout import (
    LayoutFields,
    EffectiveLayout,
    GridSize,
    compute_layout,
    measure,
)
from swatch_picker.engine.popover import (
    PopoverState,
    PopoverEvent,
    PopoverStateMachine,
    next_state,
)

__all__ = [
    "ColorGrid",
    "Resolution",
    "classify",
    "resolve",
    "DEFAULT_PRESET",
    "ExceptionMode",
    "Disposition",
    "SwatchAnnotation",
    "annotate",
    "visible_rows",
    "LayoutFields",
    "EffectiveLayout",
    "GridSize",
    "compute_layout",
    "measure",
    "PopoverState",
    "PopoverEvent",
    "PopoverStateMachine",
    "next_state",
]
