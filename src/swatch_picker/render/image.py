"""Render an annotated swatch grid to a PNG swatch sheet.

Requires Pillow (``pip install swatch-picker[image]``).

Example:
    from swatch_picker import SwatchPicker
    from swatch_picker.render.image import render_png

    picker = SwatchPicker(colors="material-light")
    render_png(picker.grid, picker.layout, "material-light.png")
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Optional, Union

from swatch_picker.core.color import is_light, to_rgb
from swatch_picker.engine.exceptions import AnnotatedGrid, Disposition, visible_rows
from swatch_picker.engine.layout import EffectiveLayout, measure

try:
    from PIL import Image, ImageDraw
    HAS_PIL = True
except ImportError:
    HAS_PIL = False


BORDER_COLOR = (200, 200, 200)
MARK_DARK = (40, 40, 40)
MARK_LIGHT = (255, 255, 255)

_LENGTH_RE = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*(px|%)?\s*$')


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image export. "
            "Install with: pip install swatch-picker[image]"
        )


def radius_pixels(border_radius: str, swatch_size: int) -> int:
    """Convert a CSS-ish radius ("6px", "50%", "0") to pixels for one swatch."""
    match = _LENGTH_RE.match(border_radius)
    if not match:
        return 0
    value = float(match.group(1))
    if match.group(2) == '%':
        value = swatch_size * value / 100
    return int(min(value, swatch_size / 2))


def render_image(
    grid: AnnotatedGrid,
    layout: EffectiveLayout,
    background_color: str = "#ffffff",
    is_selected: Optional[Callable[[str], bool]] = None,
    padding: Optional[int] = None,
) -> "Image.Image":
    """
    Draw the visible swatches onto a new RGB image.

    The canvas is the grid's measured size plus ``padding`` on every side
    (defaults to the spacing size). A ``max_height`` in the layout crops the
    sheet the same way the popover container would.
    """
    _check_pil()

    rows = [row for row in visible_rows(grid) if row]
    size = measure(rows, layout)
    pad = layout.spacing_size if padding is None else padding

    width = max(1, size.width + 2 * pad)
    height = max(1, size.height + 2 * pad)
    background = to_rgb(background_color) or (255, 255, 255)

    img = Image.new("RGB", (width, height), background)
    draw = ImageDraw.Draw(img)
    swatch = layout.swatch_size
    if swatch <= 0:
        return img
    radius = radius_pixels(layout.border_radius, swatch)
    light_background = is_light(background_color)

    for r, row in enumerate(rows):
        y = pad + r * layout.pitch
        for c, annotation in enumerate(row):
            x = pad + c * layout.pitch
            box = (x, y, x + swatch - 1, y + swatch - 1)
            fill = to_rgb(annotation.token)
            if fill is None:
                # Unparseable token: outline only
                draw.rounded_rectangle(box, radius=radius, outline=BORDER_COLOR, width=1)
                continue

            needs_border = layout.show_border or (light_background and is_light(annotation.token))
            draw.rounded_rectangle(
                box,
                radius=radius,
                fill=fill,
                outline=BORDER_COLOR if needs_border else None,
                width=1,
            )

            mark = MARK_DARK if is_light(annotation.token) else MARK_LIGHT
            inset = max(2, swatch // 4)
            if annotation.disposition is Disposition.DISABLED:
                draw.line((x + inset, y + inset, x + swatch - inset, y + swatch - inset),
                          fill=mark, width=2)
                draw.line((x + inset, y + swatch - inset, x + swatch - inset, y + inset),
                          fill=mark, width=2)
            elif is_selected and is_selected(annotation.token):
                draw.line(
                    (x + inset, y + swatch // 2,
                     x + swatch // 2 - 1, y + swatch - inset,
                     x + swatch - inset, y + inset),
                    fill=mark,
                    width=2,
                )

    return img


def render_png(
    grid: AnnotatedGrid,
    layout: EffectiveLayout,
    output_path: Union[str, Path],
    background_color: str = "#ffffff",
    is_selected: Optional[Callable[[str], bool]] = None,
    padding: Optional[int] = None,
) -> Path:
    """
    Write the swatch sheet to ``output_path`` as PNG.

    Returns:
        The output path

    Raises:
        ImportError: If Pillow is not installed
    """
    output_path = Path(output_path)
    img = render_image(grid, layout, background_color, is_selected, padding)
    img.save(output_path, format="PNG")
    return output_path
