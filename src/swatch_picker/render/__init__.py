"""Renderers driven by the picker's annotated grid and layout."""

from swatch_picker.render.terminal import TerminalSwatchRenderer, render_grid

__all__ = ["TerminalSwatchRenderer", "render_grid"]
