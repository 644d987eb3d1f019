import pytest

from vehicle_patterns.behavioral.command import (
    Car,
    LockDoors,
    MacroCommand,
    RemoteControl,
    StartEngine,
    StopEngine,
    ToggleLights,
    UnlockDoors,
)
from vehicle_patterns.domain.exceptions import ResourceNotFoundError


class TestRemoteControl:
    def setup_method(self):
        self.car = Car("Roadster")
        self.remote = RemoteControl()
        self.remote.set_command("start", StartEngine(self.car))
        self.remote.set_command("stop", StopEngine(self.car))
        self.remote.set_command("lights", ToggleLights(self.car))
        self.remote.set_command("lock", LockDoors(self.car))
        self.remote.set_command("unlock", UnlockDoors(self.car))

    def test_press_executes_command(self):
        assert self.remote.press("start") == "Roadster engine started"
        assert self.car.engine_on
        assert self.remote.history_size == 1

    def test_undo_restores_previous_state(self):
        self.remote.press("start")
        self.remote.press("lights")

        self.remote.undo()
        assert not self.car.lights_on
        self.remote.undo()
        assert not self.car.engine_on

    def test_undo_keeps_earlier_state(self):
        self.remote.press("lock")
        self.remote.press("lock")

        self.remote.undo()
        assert self.car.doors_locked
        self.remote.undo()
        assert not self.car.doors_locked

    def test_repeated_press_undoes_step_by_step(self):
        self.remote.press("start")
        self.remote.press("start")

        self.remote.undo()
        self.remote.undo()

        assert not self.car.engine_on
        assert self.remote.history_size == 0

    def test_repeated_macro_press_undoes_to_start(self):
        self.car.engine_on = True
        self.remote.set_command("leave", MacroCommand("Leave", [StopEngine(self.car), LockDoors(self.car)]))

        self.remote.press("leave")
        self.remote.press("leave")
        self.remote.undo()
        self.remote.undo()

        assert self.car.engine_on
        assert not self.car.doors_locked

    def test_redo(self):
        self.remote.press("lock")
        self.remote.undo()

        assert self.remote.redo() == "Roadster doors locked"
        assert self.car.doors_locked

    def test_new_command_clears_redo(self):
        self.remote.press("start")
        self.remote.undo()
        self.remote.press("lights")

        assert self.remote.redo() == "Nothing to redo"

    def test_empty_history(self):
        assert self.remote.undo() == "Nothing to undo"
        assert self.remote.redo() == "Nothing to redo"

    def test_unknown_button(self):
        with pytest.raises(ResourceNotFoundError):
            self.remote.press("eject")

    def test_macro_undoes_in_reverse(self):
        self.car.engine_on = True
        self.remote.set_command("leave", MacroCommand("Leave", [StopEngine(self.car), LockDoors(self.car)]))

        result = self.remote.press("leave")
        assert result == "Leave: Roadster engine stopped; Roadster doors locked"
        assert not self.car.engine_on and self.car.doors_locked

        assert self.remote.undo().startswith("Leave undone: Roadster doors lock undone")
        assert self.car.engine_on and not self.car.doors_locked
