"""Render an annotated swatch grid as true-color terminal output."""

from __future__ import annotations

from typing import Callable, Optional

from swatch_picker.core.color import is_light, to_rgb
from swatch_picker.engine.exceptions import AnnotatedGrid, Disposition, SwatchAnnotation
from swatch_picker.engine.layout import EffectiveLayout

RESET = '\x1b[0m'

SELECTED_MARK = '✓'
DISABLED_MARK = '×'
UNKNOWN_MARK = '?'


class TerminalSwatchRenderer:
    """
    Render swatches as blocks of colored spaces using 24-bit SGR codes.

    Hidden swatches are left out of the row flow, disabled ones get a
    cross, the selected one a check mark. Tokens that are not valid colors
    render as a '?' on the terminal's default background.
    """

    def __init__(
        self,
        cell_width: int = 4,
        cell_height: int = 1,
        gap: int = 1,
        background: Optional[str] = None,
    ):
        self.cell_width = max(1, cell_width)
        self.cell_height = max(1, cell_height)
        self.gap = max(0, gap)
        self.background = background

    def render(
        self,
        grid: AnnotatedGrid,
        layout: Optional[EffectiveLayout] = None,
        is_selected: Optional[Callable[[str], bool]] = None,
        cursor: Optional[tuple[int, int]] = None,
    ) -> str:
        """Render to a single string with a trailing reset."""
        return '\n'.join(self.render_lines(grid, layout, is_selected, cursor)) + RESET

    def render_lines(
        self,
        grid: AnnotatedGrid,
        layout: Optional[EffectiveLayout] = None,
        is_selected: Optional[Callable[[str], bool]] = None,
        cursor: Optional[tuple[int, int]] = None,
    ) -> list[str]:
        """
        Render to a list of lines.

        Args:
            grid: Annotated grid (hidden swatches are skipped here)
            layout: When it has a max_height, rows beyond the height budget
                are cut off
            is_selected: Predicate marking the current value
            cursor: (row, column) of a focused swatch, counted over visible
                swatches only
        """
        rows = [[a for a in row if a.visible] for row in grid]
        rows = [row for row in rows if row]
        limit = self.max_rows(layout)
        if limit is not None:
            rows = rows[:limit]

        gap = ' ' * self.gap
        bg = to_rgb(self.background) if self.background else None
        if bg is not None and gap:
            gap = f'\x1b[48;2;{bg[0]};{bg[1]};{bg[2]}m{gap}{RESET}'

        lines: list[str] = []
        for r, row in enumerate(rows):
            for band in range(self.cell_height):
                mark_band = band == self.cell_height // 2
                parts: list[str] = []
                for c, annotation in enumerate(row):
                    focused = cursor == (r, c)
                    selected = bool(is_selected and is_selected(annotation.token))
                    parts.append(self._cell(annotation, selected, focused, mark_band))
                lines.append(gap.join(parts))
        return lines

    def max_rows(self, layout: Optional[EffectiveLayout]) -> Optional[int]:
        """How many swatch rows fit in the layout's height cap."""
        if layout is None or layout.max_height is None or layout.pitch <= 0:
            return None
        return max(1, layout.max_height // layout.pitch)

    def _cell(self, annotation: SwatchAnnotation, selected: bool,
              focused: bool, mark_band: bool) -> str:
        rgb = to_rgb(annotation.token)

        mark = ' '
        if mark_band:
            if rgb is None:
                mark = UNKNOWN_MARK
            elif annotation.disposition is Disposition.DISABLED:
                mark = DISABLED_MARK
            elif selected:
                mark = SELECTED_MARK

        inner = self.cell_width - 2 if focused and self.cell_width >= 3 else self.cell_width
        pad_left = (inner - 1) // 2
        body = ' ' * pad_left + mark + ' ' * (inner - pad_left - 1)
        if focused and self.cell_width >= 3:
            body = '[' + body + ']'

        if rgb is None:
            return body
        r, g, b = rgb
        fg = '30' if is_light(annotation.token) else '97'
        return f'\x1b[{fg};48;2;{r};{g};{b}m{body}{RESET}'


def render_grid(grid: AnnotatedGrid, layout: Optional[EffectiveLayout] = None, **kwargs) -> str:
    """Convenience wrapper around TerminalSwatchRenderer."""
    return TerminalSwatchRenderer(**kwargs).render(grid, layout)
