"""State pattern - what a car may do depends on what it is doing.

Intent:
    Allow an object to alter its behaviour when its internal state changes.
    The object will appear to change its class.

``Car`` delegates every action to its current ``CarState``. Each state
implements the actions that make sense for it and switches the car to the
next state; actions that make no sense raise
``InvalidStateTransitionError`` instead of silently corrupting the car.

Transitions::

    Parked    --start_engine--> Idling
    Idling    --accelerate-->   Driving
    Idling    --reverse-->      Reversing
    Idling    --stop_engine-->  Parked
    Driving   --accelerate-->   Driving (faster)
    Driving   --brake-->        Driving, or Idling at 0 km/h
    Reversing --brake-->        Idling
"""
from typing import List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import InvalidStateTransitionError, ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class CarState:
    """Base state: every action is invalid unless a subclass allows it."""

    name = "unknown"

    def _invalid(self, action: str):
        raise InvalidStateTransitionError(self.name, action)

    def start_engine(self, car: "Car") -> str:
        self._invalid("start the engine")

    def stop_engine(self, car: "Car") -> str:
        self._invalid("stop the engine")

    def accelerate(self, car: "Car", amount: int) -> str:
        self._invalid("accelerate")

    def brake(self, car: "Car", amount: int) -> str:
        self._invalid("brake")

    def reverse(self, car: "Car") -> str:
        self._invalid("reverse")


class Parked(CarState):
    name = "parked"

    def start_engine(self, car: "Car") -> str:
        car.transition_to(Idling())
        return "Engine started"


class Idling(CarState):
    name = "idling"

    def stop_engine(self, car: "Car") -> str:
        car.transition_to(Parked())
        return "Engine stopped, car parked"

    def accelerate(self, car: "Car", amount: int) -> str:
        car.speed += amount
        car.transition_to(Driving())
        return f"Pulling away at {car.speed} km/h"

    def reverse(self, car: "Car") -> str:
        car.speed = 5
        car.transition_to(Reversing())
        return "Reversing slowly"

    def brake(self, car: "Car", amount: int) -> str:
        return "Already stationary"


class Driving(CarState):
    name = "driving"

    def accelerate(self, car: "Car", amount: int) -> str:
        car.speed += amount
        return f"Speeding up to {car.speed} km/h"

    def brake(self, car: "Car", amount: int) -> str:
        car.speed = max(0, car.speed - amount)
        if car.speed == 0:
            car.transition_to(Idling())
            return "Came to a halt"
        return f"Slowing down to {car.speed} km/h"


class Reversing(CarState):
    name = "reversing"

    def brake(self, car: "Car", amount: int) -> str:
        car.speed = 0
        car.transition_to(Idling())
        return "Stopped reversing"


class Car:
    """Context."""

    def __init__(self):
        self.speed = 0
        self._state: CarState = Parked()

    @property
    def state(self) -> str:
        return self._state.name

    def transition_to(self, state: CarState) -> None:
        logger.debug("State transition", old=self._state.name, new=state.name)
        self._state = state

    def start_engine(self) -> str:
        return self._state.start_engine(self)

    def stop_engine(self) -> str:
        return self._state.stop_engine(self)

    def accelerate(self, amount: int = 20) -> str:
        if amount <= 0:
            raise ValidationError(f"Acceleration must be positive, got {amount}")
        return self._state.accelerate(self, amount)

    def brake(self, amount: int = 20) -> str:
        if amount <= 0:
            raise ValidationError(f"Braking must be positive, got {amount}")
        return self._state.brake(self, amount)

    def reverse(self) -> str:
        return self._state.reverse(self)


def demo() -> List[str]:
    car = Car()
    lines = []
    for action in (
        car.start_engine,
        lambda: car.accelerate(30),
        lambda: car.accelerate(20),
        lambda: car.brake(50),
        car.reverse,
        car.brake,
        car.stop_engine,
        car.accelerate,
    ):
        try:
            lines.append(f"[{car.state}] {action()}")
        except InvalidStateTransitionError as e:
            lines.append(f"[{car.state}] Refused: {e}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "State pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
