"""Core TUI infrastructure - terminal I/O and input handling."""

from swatch_picker.cli.core.terminal import Terminal, TerminalSize
from swatch_picker.cli.core.input import InputReader, KeyEvent, Key, decode, decode_all
from swatch_picker.cli.core.ansi_text import visible_len, fit_to_width

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "decode",
    "decode_all",
    "visible_len",
    "fit_to_width",
]
