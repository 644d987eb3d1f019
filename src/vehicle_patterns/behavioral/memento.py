"""Memento pattern - save and roll back a car's trip state.

Intent:
    Without violating encapsulation, capture and externalize an object's
    internal state so that the object can be restored to this state later.

Participants:
    - Car (originator): creates snapshots of itself and restores from them
    - CarMemento: an immutable snapshot
    - TripHistory (caretaker): stores snapshots, never looks inside them
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)

# Litres per kilometre at cruising speed.
FUEL_PER_KM = 0.07


class CarMemento(BaseModel):
    model_config = ConfigDict(frozen=True)

    speed: int
    fuel: float
    odometer: float
    gear: str
    saved_at: datetime = Field(default_factory=datetime.now)


class Car:
    """Originator."""

    def __init__(self, fuel: float = 50.0):
        self.speed = 0
        self.fuel = fuel
        self.odometer = 0.0
        self.gear = "P"

    def drive(self, km: float, speed: int) -> None:
        if km < 0 or speed < 0:
            raise ValidationError("Distance and speed must not be negative")
        needed = km * FUEL_PER_KM
        if needed > self.fuel:
            raise ValidationError(f"Not enough fuel for {km} km ({self.fuel:.1f} L left)")
        self.speed = speed
        self.gear = "D" if speed > 0 else "N"
        self.fuel = round(self.fuel - needed, 2)
        self.odometer += km

    def save(self) -> CarMemento:
        return CarMemento(speed=self.speed, fuel=self.fuel, odometer=self.odometer, gear=self.gear)

    def restore(self, memento: CarMemento) -> None:
        self.speed = memento.speed
        self.fuel = memento.fuel
        self.odometer = memento.odometer
        self.gear = memento.gear

    def __str__(self) -> str:
        return f"gear {self.gear}, {self.speed} km/h, {self.fuel:.1f} L, odometer {self.odometer:g} km"


class TripHistory:
    """Caretaker."""

    def __init__(self, car: Car):
        self._car = car
        self._snapshots: List[CarMemento] = []

    def backup(self) -> None:
        self._snapshots.append(self._car.save())

    def undo(self) -> bool:
        if not self._snapshots:
            return False
        memento = self._snapshots.pop()
        logger.debug("Restoring snapshot", saved_at=memento.saved_at.isoformat())
        self._car.restore(memento)
        return True

    def history(self) -> List[str]:
        return [f"{m.saved_at:%H:%M:%S} odometer {m.odometer:g} km" for m in self._snapshots]

    def __len__(self) -> int:
        return len(self._snapshots)


def demo() -> List[str]:
    car = Car()
    history = TripHistory(car)

    history.backup()
    car.drive(100, 90)
    history.backup()
    car.drive(250, 120)
    lines = [f"After two legs: {car}", f"Snapshots: {len(history)}"]

    history.undo()
    lines.append(f"Undo once: {car}")
    history.undo()
    lines.append(f"Undo twice: {car}")
    lines.append(f"Undo on empty history succeeded: {history.undo()}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Memento pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
