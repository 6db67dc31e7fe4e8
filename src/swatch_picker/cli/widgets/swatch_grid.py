"""Interactive swatch grid: a trigger plus a popover (or inline) grid.

Keys:
    Enter/Space on the closed trigger opens the popover
    Arrows move between visible swatches
    Enter/Space picks the focused swatch
    Tab toggles the popover
    Esc counts as a click outside the popover
"""

from __future__ import annotations

from typing import Optional

from swatch_picker.cli.core.ansi_text import fit_to_width, visible_len
from swatch_picker.cli.core.input import Key, KeyEvent
from swatch_picker.cli.widgets.base import BaseWidget, Rect
from swatch_picker.core.color import to_rgb
from swatch_picker.engine.exceptions import AnnotatedGrid
from swatch_picker.picker import SwatchPicker
from swatch_picker.render.terminal import RESET, TerminalSwatchRenderer

_MOVES = {
    Key.UP: (-1, 0),
    Key.DOWN: (1, 0),
    Key.LEFT: (0, -1),
    Key.RIGHT: (0, 1),
}


class SwatchGridWidget(BaseWidget):
    """Keyboard-driven view over a SwatchPicker."""

    def __init__(self, picker: SwatchPicker, renderer: Optional[TerminalSwatchRenderer] = None) -> None:
        super().__init__()
        self.picker = picker
        self.renderer = renderer or TerminalSwatchRenderer(
            background=picker.config.background_color,
        )
        self._cursor = (0, 0)
        self._place_cursor_on_value()
        picker.on_grid_changed(lambda _grid: self._place_cursor_on_value())

    @property
    def cursor(self) -> tuple[int, int]:
        return self._cursor

    def _rows(self) -> AnnotatedGrid:
        """Rows the renderer actually draws, so the cursor never leaves the screen."""
        rows = tuple(row for row in self.picker.visible_grid if row)
        limit = self.renderer.max_rows(self.picker.layout)
        return rows if limit is None else rows[:limit]

    def _place_cursor_on_value(self) -> None:
        self._cursor = (0, 0)
        if self.picker.value is None:
            return
        for r, row in enumerate(self._rows()):
            for c, annotation in enumerate(row):
                if self.picker.is_selected(annotation.token):
                    self._cursor = (r, c)
                    return

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, bounds: Rect) -> list[str]:
        lines: list[str] = []
        if not self.picker.config.inline:
            lines.append(self._render_trigger())

        if self.picker.visible:
            grid_lines = self.renderer.render_lines(
                self.picker.grid,
                self.picker.layout,
                is_selected=self.picker.is_selected,
                cursor=self._cursor,
            )
            if self.picker.config.popover_to == "left":
                widest = max((visible_len(line) for line in grid_lines), default=0)
                indent = max(0, bounds.width - widest)
                grid_lines = [' ' * indent + line for line in grid_lines]
            lines.extend(grid_lines)

        lines = lines[:bounds.height]
        return [fit_to_width(line, bounds.width) for line in lines]

    def _render_trigger(self) -> str:
        left, right = ('(', ')') if self.picker.config.shapes == "circles" else ('[', ']')
        value = self.picker.value
        rgb = to_rgb(value) if value else None
        if rgb is not None:
            swatch = f'\x1b[48;2;{rgb[0]};{rgb[1]};{rgb[2]}m    {RESET}'
        else:
            swatch = '\x1b[90m····\x1b[0m'
        arrow = '▴' if self.picker.is_open else '▾'
        if self.picker.config.disabled:
            arrow = '\x1b[90m' + arrow + RESET
        label = value or 'no color'
        return f'{left}{swatch}{right} {arrow} {label}'

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def handle_input(self, event: KeyEvent) -> bool:
        picker = self.picker
        activate = event.key in (Key.ENTER, Key.SPACE)

        if not picker.visible:
            if activate or event.key == Key.TAB:
                picker.toggle()
                return True
            return False

        if event.key in _MOVES:
            self._move(*_MOVES[event.key])
            return True
        if activate:
            token = self.focused_token()
            if token is not None:
                picker.select(token)
            return True
        if event.key == Key.TAB and not picker.config.inline:
            picker.toggle()
            return True
        if event.key == Key.ESCAPE and not picker.config.inline:
            picker.outside_interaction()
            return True
        return False

    def focused_token(self) -> Optional[str]:
        rows = self._rows()
        r, c = self._cursor
        if r < len(rows) and c < len(rows[r]):
            return rows[r][c].token
        return None

    def _move(self, dr: int, dc: int) -> None:
        rows = self._rows()
        if not rows:
            return
        r, c = self._cursor
        r = min(max(r + dr, 0), len(rows) - 1)
        c = min(max(c + dc, 0), len(rows[r]) - 1)
        self._cursor = (r, c)
