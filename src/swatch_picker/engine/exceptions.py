"""Exception colors: swatches that are hidden or disabled wherever they appear."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from swatch_picker.core.color import normalize
from swatch_picker.core.errors import ConfigError


class ExceptionMode(Enum):
    """How exception colors are treated."""
    HIDDEN = "hidden"       # Removed from layout flow and interaction
    DISABLED = "disabled"   # Still drawn, but not selectable

    @classmethod
    def parse(cls, value: Union[ExceptionMode, str, None]) -> ExceptionMode:
        """Accept an enum member or its name; None means DISABLED."""
        if value is None:
            return cls.DISABLED
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigError(f"exception_mode must be 'hidden' or 'disabled', got {value!r}")


class Disposition(Enum):
    """What the rendering layer must do with a swatch."""
    NONE = "none"
    HIDDEN = "hidden"
    DISABLED = "disabled"


@dataclass(frozen=True)
class SwatchAnnotation:
    """A grid token plus its exception status."""
    token: str
    is_exception: bool = False
    disposition: Disposition = Disposition.NONE

    @property
    def visible(self) -> bool:
        return self.disposition is not Disposition.HIDDEN

    @property
    def selectable(self) -> bool:
        return self.disposition is Disposition.NONE


AnnotatedGrid = tuple[tuple[SwatchAnnotation, ...], ...]


def annotate(
    grid: Sequence[Sequence[str]],
    exceptions: Iterable[str] = (),
    mode: Union[ExceptionMode, str, None] = None,
) -> AnnotatedGrid:
    """
    Flag every grid token that matches an exception color.

    Matching compares canonical colors, so case and notation do not matter,
    and the order of ``exceptions`` has no effect. Output depends only on the
    inputs, which makes repeated calls idempotent.
    """
    mode = ExceptionMode.parse(mode)
    excluded = frozenset(normalize(color) for color in exceptions)
    disposition = Disposition(mode.value)

    def mark(token: str) -> SwatchAnnotation:
        if excluded and normalize(token) in excluded:
            return SwatchAnnotation(token, True, disposition)
        return SwatchAnnotation(token)

    return tuple(tuple(mark(token) for token in row) for row in grid)


def visible_rows(annotated: AnnotatedGrid) -> AnnotatedGrid:
    """Drop hidden swatches, keeping emptied rows so row indices stay stable."""
    return tuple(tuple(a for a in row if a.visible) for row in annotated)


def exception_tokens(annotated: AnnotatedGrid) -> list[str]:
    """Tokens flagged as exceptions, in grid order."""
    return [a.token for row in annotated for a in row if a.is_exception]


def find(annotated: AnnotatedGrid, token: str) -> Optional[SwatchAnnotation]:
    """First annotation whose token is equivalent to ``token``."""
    target = normalize(token)
    for row in annotated:
        for annotation in row:
            if normalize(annotation.token) == target:
                return annotation
    return None
