import logging

import pytest

from lifeboids.life.state import (
    SharedData,
    State,
    StateMachine,
    StateName,
    determine_number_of_cores,
)


class RecordingState(State):
    def __init__(self, state_name):
        super().__init__()
        self._name = state_name
        self.events = []

    def name(self):
        return self._name

    def setup(self):
        self.events.append("setup")

    def state_enter(self):
        self.events.append("enter")

    def state_exit(self):
        self.events.append("exit")

    def update(self):
        self.events.append("update")

    def draw(self):
        self.events.append("draw")

    def key_pressed(self, key):
        self.events.append(("key", key))

    def key_released(self, key):
        self.events.append(("release", key))

    def mouse_pressed(self, x, y, button):
        self.events.append(("mouse", x, y, button))


def test_state_names_match_source_constants():
    assert StateName("OM") is StateName.OPENMP
    assert StateName("SM") is StateName.SEQUENTIAL
    assert StateName("CL") is StateName.OPENCL
    assert StateName("GLSL") is StateName.GLSL
    assert StateName.OPENMP == "OM"
    assert StateName.SEQUENTIAL == "SM"
    assert StateName.OPENCL == "CL"
    assert StateName.GLSL == "GLSL"


def test_shared_data_defaults():
    data = SharedData()
    assert data.dimension == 10
    assert data.is_benchmark_mode is False
    assert data.number_of_cores == determine_number_of_cores()
    assert data.number_of_cores >= 1


def test_add_state_runs_setup_and_shares_data():
    data = SharedData(dimension=42)
    machine = StateMachine(data)
    state = RecordingState("A")
    returned = machine.add_state(state)
    assert returned is state
    assert state.events == ["setup"]
    assert state.shared_data is data
    assert machine.states == {"A": state}


def test_unattached_state_has_no_shared_data():
    data = SharedData(dimension=12)
    machine = StateMachine(data)
    state = RecordingState("A")
    with pytest.raises(RuntimeError):
        state.shared_data
    machine.add_state(state)
    assert state.shared_data is data


def test_change_state_exits_old_and_enters_new():
    machine = StateMachine()
    a = machine.add_state(RecordingState("A"))
    b = machine.add_state(RecordingState("B"))
    machine.change_state("A")
    machine.change_state("B")
    assert a.events == ["setup", "enter", "exit"]
    assert b.events == ["setup", "enter"]
    assert machine.current_state is b


def test_change_to_current_state_does_nothing():
    machine = StateMachine()
    a = machine.add_state(RecordingState("A"))
    machine.change_state("A")
    machine.change_state("A")
    assert a.events == ["setup", "enter"]


def test_change_to_unknown_state_raises():
    machine = StateMachine()
    machine.add_state(RecordingState("A"))
    with pytest.raises(KeyError):
        machine.change_state("missing")
    assert machine.current_state is None


def test_change_state_accepts_enum_name():
    machine = StateMachine()
    gl = machine.add_state(RecordingState(StateName.GLSL))
    machine.change_state(StateName.GLSL)
    assert machine.current_state is gl


def test_state_requested_change_goes_through_machine():
    machine = StateMachine()
    a = machine.add_state(RecordingState("A"))
    b = machine.add_state(RecordingState("B"))
    machine.change_state("A")
    a.change_state("B")
    assert machine.current_state is b
    assert a.events[-1] == "exit"


def test_events_are_forwarded_to_current_state():
    machine = StateMachine()
    a = machine.add_state(RecordingState("A"))
    machine.change_state("A")
    machine.update()
    machine.draw()
    machine.key_pressed(99)
    machine.key_released(99)
    machine.mouse_pressed(3, 4, 0)
    assert a.events[2:] == [
        "update",
        "draw",
        ("key", 99),
        ("release", 99),
        ("mouse", 3, 4, 0),
    ]


def test_update_without_state_logs_warning(caplog):
    machine = StateMachine()
    with caplog.at_level(logging.WARNING):
        machine.update()
        machine.draw()
    messages = [r.getMessage() for r in caplog.records]
    assert "State machine update called with no state set" in messages
    assert "State machine draw called with no state set" in messages


def test_states_property_is_a_copy():
    machine = StateMachine()
    machine.add_state(RecordingState("A"))
    machine.states.clear()
    assert list(machine.states) == ["A"]