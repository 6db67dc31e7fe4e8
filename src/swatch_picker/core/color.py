"""Color token normalization and equivalence.

Tokens arrive from configuration in whatever notation the caller used
(``#E31432``, ``e31432``, ``#f0f``, ``rebeccapurple``, ``rgb(255, 0, 0)``).
Everything recognizable folds to a lowercase ``#rrggbb`` (or ``#rrggbbaa``)
string so that two tokens naming the same color compare equal. Tokens that
match no grammar are kept as-is, minus surrounding whitespace.
"""

from __future__ import annotations

import re
from typing import Optional

import webcolors

RGB = tuple[int, int, int]

# Short forms need the leading '#', otherwise words like "bad" would parse
_HEX_RE = re.compile(
    r'^(?:#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})'
    r'|([0-9a-fA-F]{6}|[0-9a-fA-F]{8}))$'
)
_FUNC_RE = re.compile(r'^rgba?\(\s*([^)]*?)\s*\)$', re.IGNORECASE)
_CHANNEL_RE = re.compile(r'^(\d{1,3})(%?)$')


def normalize(token: str) -> str:
    """
    Return the canonical form of a color token.

    Never raises: malformed tokens come back stripped but otherwise verbatim,
    so comparisons fall back to literal identity.
    """
    text = token.strip()
    if not text:
        return text

    canonical = _normalize_hex(text)
    if canonical is None:
        canonical = _normalize_function(text)
    if canonical is None:
        canonical = _normalize_name(text)
    return canonical if canonical is not None else text


def equivalent(a: str, b: str) -> bool:
    """True if both tokens denote the same color."""
    return normalize(a) == normalize(b)


def is_recognized(token: str) -> bool:
    """True if the token matched one of the known color grammars."""
    return _HEX_RE.match(normalize(token)) is not None


def to_rgb(token: str) -> Optional[RGB]:
    """Get the RGB triple for a token, ignoring alpha. None if malformed."""
    canonical = normalize(token)
    if not canonical.startswith('#') or not is_recognized(canonical):
        return None
    rgb = webcolors.hex_to_rgb(canonical[:7])
    return (rgb.red, rgb.green, rgb.blue)


def is_light(token: str, threshold: float = 0.6) -> bool:
    """
    Check whether a color is light enough to need a dark outline or mark.

    Uses perceived brightness (ITU-R BT.601 weights). Malformed tokens are
    treated as dark.
    """
    rgb = to_rgb(token)
    if rgb is None:
        return False
    r, g, b = rgb
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255 >= threshold


def _normalize_hex(text: str) -> Optional[str]:
    match = _HEX_RE.match(text)
    if not match:
        return None
    digits = (match.group(1) or match.group(2)).lower()
    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)
    # Fully opaque alpha carries no information
    if len(digits) == 8 and digits.endswith('ff'):
        digits = digits[:6]
    return f"#{digits}"


def _normalize_function(text: str) -> Optional[str]:
    match = _FUNC_RE.match(text)
    if not match:
        return None
    parts = [p.strip() for p in re.split(r'[,\s/]+', match.group(1)) if p.strip()]
    if len(parts) not in (3, 4):
        return None

    channels = [_CHANNEL_RE.match(p) for p in parts[:3]]
    if not all(channels):
        return None
    percent_flags = {m.group(2) for m in channels if m}
    if len(percent_flags) != 1:
        # CSS forbids mixing integer and percent channels
        return None

    try:
        if '%' in percent_flags:
            triplet = tuple(f"{m.group(1)}%" for m in channels if m)
            if any(int(t[:-1]) > 100 for t in triplet):
                return None
            hex_value = webcolors.rgb_percent_to_hex(triplet)
        else:
            values = tuple(int(m.group(1)) for m in channels if m)
            if any(v > 255 for v in values):
                return None
            hex_value = webcolors.rgb_to_hex(values)
    except ValueError:
        return None

    if len(parts) == 4:
        alpha = _parse_alpha(parts[3])
        if alpha is None:
            return None
        if alpha < 255:
            hex_value += f"{alpha:02x}"
    return hex_value.lower()


def _parse_alpha(text: str) -> Optional[int]:
    try:
        if text.endswith('%'):
            value = float(text[:-1]) / 100
        else:
            value = float(text)
    except ValueError:
        return None
    if not 0 <= value <= 1:
        return None
    return round(value * 255)


def _normalize_name(text: str) -> Optional[str]:
    if not text.isalpha():
        return None
    try:
        return webcolors.name_to_hex(text.lower())
    except ValueError:
        return None
