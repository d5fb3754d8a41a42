import pytest

from keepwarden.state_machine import State, StateMachine


class Recorder(State):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def enter(self, params):
        self.log.append(("enter", self.name, params))

    def exit(self):
        self.log.append(("exit", self.name))

    def update(self, dt):
        self.log.append(("update", self.name, dt))

    def draw(self):
        self.log.append(("draw", self.name))


@pytest.fixture
def machine_and_log():
    log = []
    machine = StateMachine({"Idle": Recorder("Idle", log), "Run": Recorder("Run", log)})
    return machine, log


def test_no_state_does_nothing(machine_and_log):
    machine, log = machine_and_log
    machine.update(0.1)
    machine.draw()
    assert log == []
    assert machine.current_state_name == ""


def test_change_state_enters_and_exits(machine_and_log):
    machine, log = machine_and_log
    machine.change_state("Idle", {"p": 1})
    machine.change_state("Run", None)
    assert log == [("enter", "Idle", {"p": 1}), ("exit", "Idle"), ("enter", "Run", None)]
    assert machine.current_state_name == "Run"


def test_update_and_draw_forward(machine_and_log):
    machine, log = machine_and_log
    machine.change_state("Run")
    log.clear()
    machine.update(0.25)
    machine.draw()
    assert log == [("update", "Run", 0.25), ("draw", "Run")]


def test_unknown_state_raises_and_keeps_current(machine_and_log):
    machine, log = machine_and_log
    machine.change_state("Idle")
    with pytest.raises(KeyError):
        machine.change_state("Fly")
    assert machine.current_state_name == "Idle"