"""Reusable TUI widgets."""

from swatch_picker.cli.widgets.base import Widget, BaseWidget, Rect
from swatch_picker.cli.widgets.swatch_grid import SwatchGridWidget

__all__ = [
    "Widget",
    "BaseWidget",
    "Rect",
    "SwatchGridWidget",
]
