"""Pixel lengths and counts as they appear in configuration.

Front-end configs often carry sizes as strings ("18", "18px"); these helpers
read them into numbers and report anything else as None so each caller can
raise its own error type.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Union

Length = Union[int, float]

_LENGTH_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:px)?\s*$", re.IGNORECASE)


def parse_length(value: Any) -> Optional[Length]:
    """
    Read a non-negative pixel length: a number, or a string like "18" or "18px".

    Whole values come back as int. Returns None for anything else
    (negative numbers, booleans, other units), leaving the caller to
    raise its own error.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if value >= 0 else None
    if isinstance(value, str):
        match = _LENGTH_RE.match(value)
        if not match:
            return None
        number = float(match.group(1))
        return int(number) if number.is_integer() else number
    return None


def parse_count(value: Any) -> Optional[int]:
    """Read a positive whole count (such as a row length); None if invalid."""
    length = parse_length(value)
    if isinstance(length, float):
        length = int(length) if length.is_integer() else None
    if length is None or length <= 0:
        return None
    return length
