"""Popover visibility.

Transitions are a pure function of (state, event, close_on_select); the
``PopoverStateMachine`` object wraps that function with the instance flags
and change notification. Callers translate their own UI events (trigger
click, swatch click, click outside) into the transition methods.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable

logger = logging.getLogger(__name__)


class PopoverState(Enum):
    """Visibility of the popover container."""
    CLOSED = auto()
    OPEN = auto()


class PopoverEvent(Enum):
    """Inputs to the state machine."""
    OPEN = auto()
    CLOSE = auto()
    TOGGLE = auto()
    SWATCH_SELECTED = auto()
    OUTSIDE_INTERACTION = auto()


def next_state(
    state: PopoverState,
    event: PopoverEvent,
    *,
    close_on_select: bool = True,
) -> PopoverState:
    """Return the state that follows ``state`` on ``event``."""
    if event is PopoverEvent.OPEN:
        return PopoverState.OPEN
    if event is PopoverEvent.CLOSE:
        return PopoverState.CLOSED
    if event is PopoverEvent.TOGGLE:
        return PopoverState.CLOSED if state is PopoverState.OPEN else PopoverState.OPEN
    if event is PopoverEvent.SWATCH_SELECTED:
        return PopoverState.CLOSED if close_on_select else state
    if event is PopoverEvent.OUTSIDE_INTERACTION:
        return PopoverState.CLOSED
    raise ValueError(f"Unknown popover event: {event!r}")


class PopoverStateMachine:
    """
    Open/closed state for a popover picker.

    Inline pickers are always visible, so every transition is a no-op.
    A disabled picker cannot be opened but can still be closed.
    """

    def __init__(
        self,
        inline: bool = False,
        close_on_select: bool = True,
        disabled: bool = False,
    ) -> None:
        self.inline = inline
        self.close_on_select = close_on_select
        self.disabled = disabled
        self._state = PopoverState.CLOSED
        self._listeners: list[Callable[[PopoverState], None]] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def state(self) -> PopoverState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is PopoverState.OPEN

    @property
    def visible(self) -> bool:
        """Whether swatches are on screen (always True when inline)."""
        return self.inline or self.is_open

    def on_visibility_changed(self, callback: Callable[[PopoverState], None]) -> None:
        """Add a listener notified after each real state change."""
        self._listeners.append(callback)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def open(self) -> PopoverState:
        return self.dispatch(PopoverEvent.OPEN)

    def close(self) -> PopoverState:
        return self.dispatch(PopoverEvent.CLOSE)

    def toggle(self) -> PopoverState:
        return self.dispatch(PopoverEvent.TOGGLE)

    def on_swatch_selected(self) -> PopoverState:
        return self.dispatch(PopoverEvent.SWATCH_SELECTED)

    def on_outside_interaction(self) -> PopoverState:
        return self.dispatch(PopoverEvent.OUTSIDE_INTERACTION)

    def dispatch(self, event: PopoverEvent) -> PopoverState:
        """Apply ``event`` and return the resulting state."""
        if self.inline:
            return self._state

        new_state = next_state(self._state, event, close_on_select=self.close_on_select)
        if self.disabled and new_state is PopoverState.OPEN:
            return self._state
        if new_state is self._state:
            return self._state

        logger.debug("Popover %s -> %s on %s", self._state.name, new_state.name, event.name)
        self._state = new_state
        for callback in list(self._listeners):
            callback(new_state)
        return new_state

    def reset(self) -> None:
        """Force CLOSED without notifying (used when switching to inline)."""
        self._state = PopoverState.CLOSED
