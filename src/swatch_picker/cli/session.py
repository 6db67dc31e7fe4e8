"""Full-screen interactive picking session."""

from __future__ import annotations

import sys
from typing import Optional

from swatch_picker.cli.core.ansi_text import fit_to_width
from swatch_picker.cli.core.input import InputReader, KeyEvent
from swatch_picker.cli.core.terminal import Terminal
from swatch_picker.cli.widgets.base import Rect
from swatch_picker.cli.widgets.swatch_grid import SwatchGridWidget
from swatch_picker.picker import SwatchPicker


class PickerSession:
    """
    Runs a SwatchGridWidget until the user picks a color or quits.

    A pick ends the session once the popover has closed (or immediately for
    inline pickers); 'q' ends it at any time.
    """

    def __init__(self, picker: SwatchPicker) -> None:
        self.picker = picker
        self.widget = SwatchGridWidget(picker)
        self.widget.focused = True
        self.input = InputReader()
        self.running = False
        self._picked = False
        picker.on_select(self._on_select)

    def run(self) -> Optional[str]:
        """Main loop; returns the picked color (or the initial value)."""
        self.running = True
        with Terminal.managed_mode():
            Terminal.clear()
            while self.running:
                self._render()
                event = self.input.read(timeout=0.05)
                if event is not None:
                    self.handle(event)
        return self.picker.value

    def handle(self, event: KeyEvent) -> None:
        if event.char == 'q':
            self.running = False
            return
        self.widget.handle_input(event)
        if self._picked and (self.picker.config.inline or not self.picker.is_open):
            self.running = False

    def _on_select(self, token: str) -> None:
        self._picked = True

    def _render(self) -> None:
        size = Terminal.size()
        body_height = max(1, size.rows - 1)
        lines = self.widget.render(Rect(0, 0, size.cols, body_height))
        lines += [''] * (body_height - len(lines))
        lines.append(fit_to_width(self._hint(), size.cols))

        Terminal.home()
        sys.stdout.write('\r\n'.join(line + '\x1b[K' for line in lines))
        sys.stdout.flush()

    def _hint(self) -> str:
        if self.picker.visible:
            hint = "←↑↓→ move  ⏎ pick"
            if not self.picker.config.inline:
                hint += "  esc close"
        else:
            hint = "⏎ open"
        return f"\x1b[90m{hint}  q quit\x1b[0m"


def run_picker(picker: SwatchPicker) -> Optional[str]:
    """Launch an interactive session and return the chosen color."""
    return PickerSession(picker).run()
