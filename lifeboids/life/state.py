"""Named application states, the data they share and the machine that switches them."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

_log = logging.getLogger(__name__)


class StateName(str, Enum):
    """Names under which the colony modes are registered."""

    OPENMP = "OM"
    SEQUENTIAL = "SM"
    OPENCL = "CL"
    GLSL = "GLSL"


def determine_number_of_cores() -> int:
    """Number of processors available on this machine (at least 1)."""
    return os.cpu_count() or 1


@dataclass
class SharedData:
    """Settings visible to every state of a machine."""

    dimension: int = 10
    is_benchmark_mode: bool = False
    number_of_cores: int = field(default_factory=determine_number_of_cores)


class State(ABC):
    """One state of a state machine; every hook does nothing unless overridden."""

    def __init__(self) -> None:
        self._shared_data: SharedData | None = None
        self._change_listeners: list[Callable[[str], None]] = []

    @property
    def shared_data(self) -> SharedData:
        """The data shared by the machine this state belongs to."""
        if self._shared_data is None:
            raise RuntimeError("state has not been added to a state machine")
        return self._shared_data

    @shared_data.setter
    def shared_data(self, data: SharedData) -> None:
        self._shared_data = data

    @abstractmethod
    def name(self) -> str:
        """The name this state is registered under."""

    def state_enter(self) -> None:
        """Called when the machine switches to this state."""

    def state_exit(self) -> None:
        """Called when the machine switches away from this state."""

    def setup(self) -> None:
        """Called once when the state is added to a machine."""

    def update(self) -> None:
        """Advance the state by one frame."""

    def draw(self) -> None:
        """Render the state."""

    def key_pressed(self, key: int) -> None:
        """Handle a pressed key."""

    def key_released(self, key: int) -> None:
        """Handle a released key."""

    def mouse_pressed(self, x: int, y: int, button: int) -> None:
        """Handle a mouse button press."""

    def add_change_listener(self, listener: Callable[[str], None]) -> None:
        """Register a callback told about requested state changes."""
        self._change_listeners.append(listener)

    def change_state(self, name: str) -> None:
        """Ask the owning machine to switch to the state called name."""
        for listener in list(self._change_listeners):
            listener(name)


class StateMachine:
    """Holds named states and forwards frame and input events to the current one."""

    def __init__(self, shared_data: SharedData | None = None) -> None:
        self.shared_data = shared_data if shared_data is not None else SharedData()
        self._states: dict[str, State] = {}
        self._current: State | None = None

    @property
    def states(self) -> dict[str, State]:
        """A copy of the registered states by name."""
        return dict(self._states)

    @property
    def current_state(self) -> State | None:
        return self._current

    def add_state(self, state: State) -> State:
        """Register a state, give it the shared data and run its setup."""
        state.shared_data = self.shared_data
        state.setup()
        state.add_change_listener(self.change_state)
        self._states[str(state.name())] = state
        return state

    def change_state(self, name: str) -> None:
        """Switch to the named state; switching to the current one does nothing."""
        key = name.value if isinstance(name, StateName) else str(name)
        try:
            target = self._states[key]
        except KeyError:
            raise KeyError(
                f"no state with name {key!r}; make sure it was added to the "
                "state machine and that its name() is correct"
            ) from None
        if target is self._current:
            return
        if self._current is not None:
            self._current.state_exit()
        self._current = target
        target.state_enter()

    def update(self) -> None:
        if self._current is not None:
            self._current.update()
        else:
            _log.warning("State machine update called with no state set")

    def draw(self) -> None:
        if self._current is not None:
            self._current.draw()
        else:
            _log.warning("State machine draw called with no state set")

    def key_pressed(self, key: int) -> None:
        if self._current is not None:
            self._current.key_pressed(key)
        else:
            _log.warning("State machine keyPressed called with no state set")

    def key_released(self, key: int) -> None:
        if self._current is not None:
            self._current.key_released(key)
        else:
            _log.warning("State machine keyReleased called with no state set")

    def mouse_pressed(self, x: int, y: int, button: int) -> None:
        if self._current is not None:
            self._current.mouse_pressed(x, y, button)