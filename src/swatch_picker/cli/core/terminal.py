"""Low-level terminal operations for the interactive picker."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O helpers writing straight to stdout."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions (24x80 when not a tty)."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def home() -> None:
        """Move the cursor to the top-left corner."""
        Terminal.write('\x1b[H')

    @staticmethod
    def clear() -> None:
        Terminal.write('\x1b[2J\x1b[H')

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # No termios on Windows; input stays line-buffered
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Alternate screen, hidden cursor, raw input; all undone on exit."""
        Terminal.write('\x1b[?1049h\x1b[?25l')
        try:
            with Terminal.raw_mode():
                yield
        finally:
            Terminal.write('\x1b[0m\x1b[?25h\x1b[?1049l')
