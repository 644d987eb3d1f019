"""Bridge pattern - vehicles and engines vary independently.

Intent:
    Decouple an abstraction from its implementation so that the two can vary
    independently.

Without the bridge, every vehicle/engine pair needs its own class
(PetrolCar, ElectricCar, DieselTruck, ...). With it, ``Vehicle`` holds a
reference to an ``Engine`` and delegates to it: three vehicles and three
engines give nine combinations from six classes, and the engine can be
swapped at runtime.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class Engine(ABC):
    """Implementor."""

    @abstractmethod
    def start(self) -> str:
        pass

    @abstractmethod
    def power_output(self) -> int:
        """Power in kW."""


class PetrolEngine(Engine):
    def start(self) -> str:
        return "petrol engine roars to life"

    def power_output(self) -> int:
        return 110


class DieselEngine(Engine):
    def start(self) -> str:
        return "diesel engine rumbles after glow plugs warm up"

    def power_output(self) -> int:
        return 250


class ElectricEngine(Engine):
    def start(self) -> str:
        return "electric motor hums silently"

    def power_output(self) -> int:
        return 150


class Vehicle(ABC):
    """Abstraction."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def swap_engine(self, engine: Engine) -> None:
        logger.debug(
            "Swapping engine",
            vehicle=type(self).__name__,
            old=type(self.engine).__name__,
            new=type(engine).__name__,
        )
        self.engine = engine

    @abstractmethod
    def drive(self) -> str:
        pass


class Car(Vehicle):
    def drive(self) -> str:
        return f"Car: {self.engine.start()}, cruising at {self.engine.power_output()} kW"


class Truck(Vehicle):
    def drive(self) -> str:
        # Heavy loads halve the usable power.
        return f"Truck: {self.engine.start()}, hauling with {self.engine.power_output() // 2} kW to spare"


class Motorcycle(Vehicle):
    def drive(self) -> str:
        return f"Motorcycle: {self.engine.start()}, weaving through traffic"


def demo() -> List[str]:
    car = Car(PetrolEngine())
    lines = [
        car.drive(),
        Truck(DieselEngine()).drive(),
        Motorcycle(ElectricEngine()).drive(),
    ]
    car.swap_engine(ElectricEngine())
    lines.append(f"After swap -> {car.drive()}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Bridge pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
