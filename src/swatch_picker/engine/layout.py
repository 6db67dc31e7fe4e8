"""Swatch and container sizing.

Each layout field resolves independently through three tiers: a value the
caller set explicitly, then a value carried by the resolved preset, then a
built-in default. Inline pickers never cap their height.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

DEFAULT_SWATCH_SIZE = 42
DEFAULT_MAX_HEIGHT = 300
DEFAULT_TRIGGER_SIZE = 42

SHAPES = ("squares", "circles")

BorderRadius = Union[int, str]


@dataclass(frozen=True)
class LayoutFields:
    """A partial layout: any field may be left unset (None)."""
    swatch_size: Optional[int] = None
    spacing_size: Optional[int] = None
    border_radius: Optional[BorderRadius] = None
    max_height: Optional[int] = None
    row_length: Optional[int] = None
    show_border: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LayoutFields:
        """Pick the layout keys out of a mapping, ignoring everything else."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class EffectiveLayout:
    """Fully resolved sizing. ``max_height`` of None means no cap."""
    swatch_size: int
    spacing_size: int
    border_radius: str
    max_height: Optional[int]
    row_length: Optional[int] = None
    show_border: bool = False

    @property
    def pitch(self) -> int:
        """Distance from one swatch origin to the next."""
        return self.swatch_size + self.spacing_size


@dataclass(frozen=True)
class GridSize:
    """Pixel extent of a rendered grid."""
    width: int
    height: int
    content_height: int

    @property
    def scrolls(self) -> bool:
        return self.content_height > self.height


@dataclass(frozen=True)
class TriggerStyle:
    """Sizing for the popover trigger button."""
    size: int
    border_radius: str


def compute_layout(
    explicit: Optional[LayoutFields] = None,
    preset: Optional[LayoutFields] = None,
    inline: bool = False,
    shapes: str = "squares",
) -> EffectiveLayout:
    """
    Resolve every layout field by precedence: explicit > preset > default.

    Args:
        explicit: Values set directly on the picker
        preset: Values carried by the resolved preset
        inline: Inline pickers get ``max_height=None`` no matter what
        shapes: Picks the default border radius ("squares" or "circles")
    """
    explicit = explicit or LayoutFields()
    preset = preset or LayoutFields()

    def pick(name: str) -> Any:
        value = getattr(explicit, name)
        if value is not None:
            return value
        return getattr(preset, name)

    swatch_size = pick("swatch_size")
    if swatch_size is None:
        swatch_size = DEFAULT_SWATCH_SIZE

    spacing_size = pick("spacing_size")
    if spacing_size is None:
        spacing_size = round(swatch_size * 0.25)

    border_radius = pick("border_radius")
    if border_radius is None:
        border_radius = _default_border_radius(shapes, swatch_size)

    if inline:
        max_height = None
    else:
        max_height = pick("max_height")
        if max_height is None:
            max_height = DEFAULT_MAX_HEIGHT

    show_border = pick("show_border")

    return EffectiveLayout(
        swatch_size=swatch_size,
        spacing_size=spacing_size,
        border_radius=format_border_radius(border_radius),
        max_height=max_height,
        row_length=pick("row_length"),
        show_border=bool(show_border),
    )


def format_border_radius(value: BorderRadius) -> str:
    """Numbers become pixel lengths; strings pass through untouched."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value}px"
    return str(value)


def _default_border_radius(shapes: str, swatch_size: int) -> str:
    if shapes == "circles":
        return "50%"
    return f"{round(swatch_size * 0.25)}px"


def measure(rows: Sequence[Sequence[Any]], layout: EffectiveLayout) -> GridSize:
    """
    Compute the pixel size of a grid of visible swatches.

    Every swatch carries ``spacing_size`` of margin on its right and bottom.
    When ``row_length`` is set it fixes the width; otherwise the longest row
    does. Empty rows take no vertical space.
    """
    populated = [row for row in rows if len(row) > 0]
    if layout.row_length:
        columns = layout.row_length
    else:
        columns = max((len(row) for row in populated), default=0)

    width = columns * layout.pitch
    content_height = len(populated) * layout.pitch
    height = content_height
    if layout.max_height is not None:
        height = min(content_height, layout.max_height)
    return GridSize(width=width, height=height, content_height=content_height)


def trigger_style(shapes: str = "squares", size: int = DEFAULT_TRIGGER_SIZE) -> TriggerStyle:
    """Trigger sizing: round for circles, softly rounded square otherwise."""
    radius = "50%" if shapes == "circles" else "10px"
    return TriggerStyle(size=size, border_radius=radius)
