"""Command pattern - a remote key fob with undo.

Intent:
    Encapsulate a request as an object, thereby letting you parameterize
    clients with different requests, queue or log requests, and support
    undoable operations.

Participants:
    - Car: the receiver that knows how to do the work
    - Command and its subclasses: one object per action, each able to
      ``execute()`` and ``undo()``
    - MacroCommand: a command made of commands
    - RemoteControl: the invoker; it knows slots and history, not cars
"""
import copy
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ResourceNotFoundError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class Car:
    """Receiver."""

    def __init__(self, name: str = "Car"):
        self.name = name
        self.engine_on = False
        self.lights_on = False
        self.doors_locked = False

    def status(self) -> str:
        return (
            f"{self.name}: engine {'on' if self.engine_on else 'off'}, "
            f"lights {'on' if self.lights_on else 'off'}, "
            f"doors {'locked' if self.doors_locked else 'unlocked'}"
        )


class Command(ABC):
    @abstractmethod
    def execute(self) -> str:
        pass

    @abstractmethod
    def undo(self) -> str:
        pass

    def clone(self) -> "Command":
        """Fresh copy that shares the receiver but keeps its own undo snapshot."""
        return copy.copy(self)


class StartEngine(Command):
    def __init__(self, car: Car):
        self.car = car
        self._was_on = False

    def execute(self) -> str:
        self._was_on = self.car.engine_on
        self.car.engine_on = True
        return f"{self.car.name} engine started"

    def undo(self) -> str:
        self.car.engine_on = self._was_on
        return f"{self.car.name} engine start undone"


class StopEngine(Command):
    def __init__(self, car: Car):
        self.car = car
        self._was_on = False

    def execute(self) -> str:
        self._was_on = self.car.engine_on
        self.car.engine_on = False
        return f"{self.car.name} engine stopped"

    def undo(self) -> str:
        self.car.engine_on = self._was_on
        return f"{self.car.name} engine stop undone"


class ToggleLights(Command):
    def __init__(self, car: Car):
        self.car = car

    def execute(self) -> str:
        self.car.lights_on = not self.car.lights_on
        return f"{self.car.name} lights {'on' if self.car.lights_on else 'off'}"

    def undo(self) -> str:
        return self.execute()


class LockDoors(Command):
    def __init__(self, car: Car):
        self.car = car
        self._was_locked = False

    def execute(self) -> str:
        self._was_locked = self.car.doors_locked
        self.car.doors_locked = True
        return f"{self.car.name} doors locked"

    def undo(self) -> str:
        self.car.doors_locked = self._was_locked
        return f"{self.car.name} doors lock undone"


class UnlockDoors(Command):
    def __init__(self, car: Car):
        self.car = car
        self._was_locked = False

    def execute(self) -> str:
        self._was_locked = self.car.doors_locked
        self.car.doors_locked = False
        return f"{self.car.name} doors unlocked"

    def undo(self) -> str:
        self.car.doors_locked = self._was_locked
        return f"{self.car.name} doors unlock undone"


class MacroCommand(Command):
    """Runs its commands in order; undoes them in reverse."""

    def __init__(self, name: str, commands: List[Command]):
        self.name = name
        self.commands = list(commands)

    def execute(self) -> str:
        results = [command.execute() for command in self.commands]
        return f"{self.name}: " + "; ".join(results)

    def undo(self) -> str:
        results = [command.undo() for command in reversed(self.commands)]
        return f"{self.name} undone: " + "; ".join(results)

    def clone(self) -> "MacroCommand":
        return MacroCommand(self.name, [command.clone() for command in self.commands])


class RemoteControl:
    """Invoker with named buttons and an undo/redo history."""

    def __init__(self):
        self._slots: Dict[str, Command] = {}
        self._history: List[Command] = []
        self._redo: List[Command] = []

    def set_command(self, button: str, command: Command) -> None:
        self._slots[button] = command

    def press(self, button: str) -> str:
        command = self._slots.get(button)
        if command is None:
            raise ResourceNotFoundError("Button", button)
        logger.debug("Button pressed", button=button, command=type(command).__name__)
        # History holds one record per press
        command = command.clone()
        result = command.execute()
        self._history.append(command)
        self._redo.clear()
        return result

    def undo(self) -> str:
        if not self._history:
            return "Nothing to undo"
        command = self._history.pop()
        self._redo.append(command)
        return command.undo()

    def redo(self) -> str:
        if not self._redo:
            return "Nothing to redo"
        command = self._redo.pop()
        self._history.append(command)
        return command.execute()

    @property
    def history_size(self) -> int:
        return len(self._history)


def demo() -> List[str]:
    car = Car("Roadster")
    remote = RemoteControl()
    remote.set_command("start", StartEngine(car))
    remote.set_command("stop", StopEngine(car))
    remote.set_command("lights", ToggleLights(car))
    remote.set_command("lock", LockDoors(car))
    remote.set_command("unlock", UnlockDoors(car))
    remote.set_command("leave", MacroCommand("Leave car", [StopEngine(car), LockDoors(car)]))

    return [
        remote.press("unlock"),
        remote.press("start"),
        remote.press("lights"),
        car.status(),
        remote.undo(),
        car.status(),
        remote.redo(),
        remote.press("leave"),
        car.status(),
        remote.undo(),
        car.status(),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Command pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
