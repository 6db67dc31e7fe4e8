"""Measuring and fitting strings that contain ANSI escape codes."""

from __future__ import annotations

import re

_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(_ANSI_ESCAPE.sub('', s))


def fit_to_width(s: str, width: int) -> str:
    """
    Cut or pad ``s`` to exactly ``width`` visible columns.

    Escape sequences are copied through whole and never counted; a reset is
    appended when visible text was cut so colors do not bleed.
    """
    if width <= 0:
        return ""

    out: list[str] = []
    shown = 0
    pos = 0
    while pos < len(s) and shown < width:
        match = _ANSI_ESCAPE.match(s, pos)
        if match:
            out.append(match.group())
            pos = match.end()
            continue
        out.append(s[pos])
        shown += 1
        pos += 1

    result = ''.join(out)
    if pos < len(s) and visible_len(s[pos:]) > 0:
        result += '\x1b[0m'
    return result + ' ' * (width - shown)
