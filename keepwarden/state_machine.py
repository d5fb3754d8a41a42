"""Named states with enter/exit hooks."""

from __future__ import annotations

from typing import Any, Mapping, Optional


class State:
    """Base state; subclasses override the hooks they need."""

    def enter(self, params: Any) -> None:
        """Called when the machine switches to this state."""

    def exit(self) -> None:
        """Called when the machine leaves this state."""

    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""

    def draw(self) -> None:
        """Render the state."""


class StateMachine:
    """Holds named states and forwards update and draw to the current one."""

    def __init__(self, states: Mapping[str, State]) -> None:
        self.states = dict(states)
        self.current_state: Optional[State] = None
        self.current_state_name = ""

    def change_state(self, name: str, params: Any = None) -> None:
        """Leave the current state and enter ``name``; unknown names raise KeyError."""
        new_state = self.states[name]
        if self.current_state is not None:
            self.current_state.exit()
        self.current_state = new_state
        new_state.enter(params)
        self.current_state_name = name

    def update(self, dt: float) -> None:
        """Update the current state, if any."""
        if self.current_state is not None:
            self.current_state.update(dt)

    def draw(self) -> None:
        """Draw the current state, if any."""
        if self.current_state is not None:
            self.current_state.draw()