"""The swatch picker: options in, annotated grid + layout + visibility out.

``SwatchPicker`` owns one config and everything derived from it. Any option
change re-runs resolve -> annotate -> layout before ``configure`` returns,
and listeners hear about the grid or layout only when it actually changed.

Example:
    >>> picker = SwatchPicker(colors=["#e31432", "#a156e2"],
    ...                       exceptions=["#E31432"], exception_mode="hidden")
    >>> picker.on_select(print)
    >>> picker.open()
    <PopoverState.OPEN: 2>
    >>> picker.select("#a156e2")
    #a156e2
    True
    >>> picker.is_open
    False
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from swatch_picker.config import SwatchesConfig
from swatch_picker.core.color import normalize
from swatch_picker.engine.exceptions import AnnotatedGrid, annotate, find, visible_rows
from swatch_picker.engine.layout import (
    EffectiveLayout,
    GridSize,
    TriggerStyle,
    compute_layout,
    measure,
    trigger_style,
)
from swatch_picker.engine.popover import PopoverState, PopoverStateMachine
from swatch_picker.engine.resolver import PresetLookup, Resolution, resolve
from swatch_picker.presets.catalog import default_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trigger:
    """What the popover trigger should show."""
    style: TriggerStyle
    color: Optional[str]


class SwatchPicker:
    """A color swatch picker driven by a ``SwatchesConfig``."""

    def __init__(
        self,
        config: Optional[SwatchesConfig] = None,
        registry: Optional[PresetLookup] = None,
        **options: Any,
    ) -> None:
        base = config or SwatchesConfig()
        self._config = base.replace(**options) if options else base
        self._registry = registry if registry is not None else default_registry()

        self._popover = PopoverStateMachine(
            inline=self._config.inline,
            close_on_select=self._config.close_on_select,
            disabled=self._config.disabled,
        )
        self._value: Optional[str] = self._config.value

        # Listeners
        self._grid_listeners: list[Callable[[AnnotatedGrid], None]] = []
        self._layout_listeners: list[Callable[[EffectiveLayout], None]] = []
        self._select_listeners: list[Callable[[str], None]] = []

        self._resolution, self._annotated, self._layout = self._derive(self._config)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def config(self) -> SwatchesConfig:
        return self._config

    @property
    def resolution(self) -> Resolution:
        return self._resolution

    @property
    def grid(self) -> AnnotatedGrid:
        """Annotated grid, hidden swatches included."""
        return self._annotated

    @property
    def visible_grid(self) -> AnnotatedGrid:
        """Annotated grid with hidden swatches removed."""
        return visible_rows(self._annotated)

    @property
    def layout(self) -> EffectiveLayout:
        return self._layout

    @property
    def size(self) -> GridSize:
        return measure(self.visible_grid, self._layout)

    @property
    def state(self) -> PopoverState:
        return self._popover.state

    @property
    def is_open(self) -> bool:
        return self._popover.is_open

    @property
    def visible(self) -> bool:
        return self._popover.visible

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def trigger(self) -> Trigger:
        style = trigger_style(self._config.shapes, self._config.trigger_size)
        return Trigger(style=style, color=self._value)

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def on_grid_changed(self, callback: Callable[[AnnotatedGrid], None]) -> None:
        self._grid_listeners.append(callback)

    def on_layout_changed(self, callback: Callable[[EffectiveLayout], None]) -> None:
        self._layout_listeners.append(callback)

    def on_visibility_changed(self, callback: Callable[[PopoverState], None]) -> None:
        self._popover.on_visibility_changed(callback)

    def on_select(self, callback: Callable[[str], None]) -> None:
        self._select_listeners.append(callback)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def configure(self, **changes: Any) -> None:
        """
        Apply option changes and re-derive grid and layout.

        Nothing is updated if validation or resolution fails; the error is
        raised before any listener runs.
        """
        config = self._config.replace(**changes)
        resolution, annotated, layout = self._derive(config)

        grid_changed = annotated != self._annotated
        layout_changed = layout != self._layout

        self._config = config
        self._resolution = resolution
        self._annotated = annotated
        self._layout = layout

        self._popover.close_on_select = config.close_on_select
        self._popover.disabled = config.disabled
        if config.inline != self._popover.inline:
            self._popover.inline = config.inline
            self._popover.reset()
        if "value" in changes:
            self._value = config.value

        logger.debug("Reconfigured %s (grid changed: %s, layout changed: %s)",
                     sorted(changes), grid_changed, layout_changed)
        if grid_changed:
            for callback in list(self._grid_listeners):
                callback(annotated)
        if layout_changed:
            for callback in list(self._layout_listeners):
                callback(layout)

    def _derive(self, config: SwatchesConfig) -> tuple[Resolution, AnnotatedGrid, EffectiveLayout]:
        resolution = resolve(config.colors, self._registry, row_length=config.row_length)
        annotated = annotate(resolution.grid, config.exceptions, config.exception_mode)
        layout = compute_layout(
            config.explicit_layout(),
            resolution.preset_layout,
            inline=config.inline,
            shapes=config.shapes,
        )
        return resolution, annotated, layout

    # -------------------------------------------------------------------------
    # Interaction
    # -------------------------------------------------------------------------

    def open(self) -> PopoverState:
        return self._popover.open()

    def close(self) -> PopoverState:
        return self._popover.close()

    def toggle(self) -> PopoverState:
        return self._popover.toggle()

    def outside_interaction(self) -> PopoverState:
        return self._popover.on_outside_interaction()

    def select(self, token: str) -> bool:
        """
        Select a swatch by color.

        Returns False (and changes nothing) if the color is not in the grid
        or is an exception swatch.
        """
        annotation = find(self._annotated, token)
        if annotation is None or not annotation.selectable:
            logger.debug("Ignoring selection of %r", token)
            return False

        self._value = annotation.token
        for callback in list(self._select_listeners):
            callback(annotation.token)
        self._popover.on_swatch_selected()
        return True

    def is_selected(self, token: str) -> bool:
        """True if ``token`` is the current value (compared as colors)."""
        return self._value is not None and normalize(self._value) == normalize(token)
