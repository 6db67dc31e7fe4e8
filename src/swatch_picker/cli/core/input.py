"""Keyboard input: decoding raw terminal bytes into key events."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    SPACE = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


# Escape sequences, without the leading ESC
SEQUENCES: dict[str, Key] = {
    '[A': Key.UP,
    '[B': Key.DOWN,
    '[C': Key.RIGHT,
    '[D': Key.LEFT,
    'OA': Key.UP,
    'OB': Key.DOWN,
    'OC': Key.RIGHT,
    'OD': Key.LEFT,
    '[H': Key.HOME,
    '[F': Key.END,
    '[1~': Key.HOME,
    '[4~': Key.END,
}

SIMPLE_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    ' ': Key.SPACE,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}


def decode(buffer: str) -> tuple[Optional[KeyEvent], str]:
    """
    Decode the first key event in ``buffer``.

    Returns:
        (event, remaining buffer). The event is None when the leading
        character is an unknown control character, which is dropped.
    """
    if not buffer:
        return None, buffer

    first = buffer[0]
    if first in SIMPLE_KEYS:
        return KeyEvent(key=SIMPLE_KEYS[first], raw=first), buffer[1:]

    if first == '\x1b':
        rest = buffer[1:]
        end = 0
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                break
            end = i + 1
            # Sequence ends on a letter or '~', but not on the introducer itself
            if i > 0 and (ch.isalpha() or ch == '~'):
                break
        if end == 0:
            return KeyEvent(key=Key.ESCAPE, raw='\x1b'), rest
        seq = rest[:end]
        return KeyEvent(key=SEQUENCES.get(seq), raw='\x1b' + seq), rest[end:]

    if first.isprintable():
        return KeyEvent(char=first, raw=first), buffer[1:]

    return None, buffer[1:]


def decode_all(buffer: str) -> list[KeyEvent]:
    """Decode every key event in ``buffer``, skipping unknown control bytes."""
    events: list[KeyEvent] = []
    while buffer:
        event, buffer = decode(buffer)
        if event is not None:
            events.append(event)
    return events


class InputReader:
    """
    Non-blocking keyboard reader for raw-mode terminals.

    Reads with os.read() so that escape sequences split across reads can be
    reassembled before decoding.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno()

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """Read a single key event, or None if nothing arrived within timeout."""
        if not self._buffer:
            if not self._has_input(timeout):
                return None
            self._fill()
            if self._buffer == '\x1b':
                self._wait_for_sequence()

        event, self._buffer = decode(self._buffer)
        return event

    def _fill(self) -> None:
        try:
            data = os.read(self._fd, 1024)
        except (OSError, BlockingIOError):
            return
        self._buffer += data.decode('utf-8', errors='replace')

    def _wait_for_sequence(self) -> None:
        """Give a lone ESC up to 100ms to grow into a full sequence."""
        deadline = time.monotonic() + 0.1
        while time.monotonic() < deadline:
            if self._has_input(min(0.025, max(0.0, deadline - time.monotonic()))):
                self._fill()
                rest = self._buffer[1:]
                if rest in SEQUENCES or (len(rest) > 1 and (rest[-1].isalpha() or rest[-1] == '~')):
                    return

    def _has_input(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
