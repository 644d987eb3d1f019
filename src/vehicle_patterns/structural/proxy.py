"""Proxy pattern - only licensed drivers get the keys.

Intent:
    Provide a surrogate or placeholder for another object to control access
    to it.

``CarProxy`` implements the same ``Drivable`` interface as ``Car``. It is a
protection proxy (it checks the driver's age) and a virtual proxy (the real
car is only created on the first permitted drive).
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)

MINIMUM_DRIVING_AGE = 16


class Driver:
    def __init__(self, name: str, age: int):
        if age < 0:
            raise ValidationError(f"Driver age must not be negative, got {age}")
        self.name = name
        self.age = age


class Drivable(ABC):
    """Subject."""

    @abstractmethod
    def drive(self) -> str:
        pass


class Car(Drivable):
    """Real subject."""

    def __init__(self, driver: Driver):
        self.driver = driver

    def drive(self) -> str:
        return f"{self.driver.name} is driving the car"


class CarProxy(Drivable):
    def __init__(self, driver: Driver):
        self.driver = driver
        self._car: Optional[Car] = None

    @property
    def car_created(self) -> bool:
        return self._car is not None

    def drive(self) -> str:
        if self.driver.age < MINIMUM_DRIVING_AGE:
            logger.debug("Refused driver below minimum age", driver=self.driver.name, age=self.driver.age)
            return f"Sorry, {self.driver.name} is too young to drive ({self.driver.age} < {MINIMUM_DRIVING_AGE})"
        if self._car is None:
            self._car = Car(self.driver)
        return self._car.drive()


def demo() -> List[str]:
    teenager = CarProxy(Driver("Tom", 15))
    adult = CarProxy(Driver("Anna", 34))
    return [
        teenager.drive(),
        f"Car created for Tom: {teenager.car_created}",
        adult.drive(),
        f"Car created for Anna: {adult.car_created}",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Proxy pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
