"""Decorator pattern - add options to a car without subclass explosion.

Intent:
    Attach additional responsibilities to an object dynamically. Decorators
    provide a flexible alternative to subclassing for extending behaviour.

Each option (sunroof, leather seats, ...) wraps a ``Vehicle`` and is itself a
``Vehicle``, so options stack in any order and in any number.

Python also has decorator *syntax* for functions. ``log_assembly`` shows the
same idea applied to a callable: it wraps a build step, keeps its name and
signature through ``functools.wraps``, and adds logging around it.
"""
import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TypeVar

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def log_assembly(func: F) -> F:
    """Log each call of a build step and the vehicle it returns."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug("Assembly step started", step=func.__name__)
        result = func(*args, **kwargs)
        summary = result.description() if isinstance(result, Vehicle) else result
        logger.debug("Assembly step finished", step=func.__name__, result=summary)
        return result

    return wrapper  # type: ignore[return-value]


class Vehicle(ABC):
    """Component."""

    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def cost(self) -> float:
        pass


class BasicCar(Vehicle):
    def __init__(self, model: str = "Hatchback", base_price: float = 20000.0):
        self.model = model
        self.base_price = base_price

    def description(self) -> str:
        return self.model

    def cost(self) -> float:
        return self.base_price


class VehicleDecorator(Vehicle):
    """Base decorator: forwards everything to the wrapped vehicle."""

    option_name = ""
    option_price = 0.0

    def __init__(self, vehicle: Vehicle):
        self._vehicle = vehicle

    def description(self) -> str:
        return f"{self._vehicle.description()} + {self.option_name}"

    def cost(self) -> float:
        return self._vehicle.cost() + self.option_price


class Sunroof(VehicleDecorator):
    option_name = "sunroof"
    option_price = 1200.0


class LeatherSeats(VehicleDecorator):
    option_name = "leather seats"
    option_price = 1800.0


class Navigation(VehicleDecorator):
    option_name = "navigation"
    option_price = 750.0


class SportPackage(VehicleDecorator):
    """Sport package also bumps the price of everything beneath it by 5%."""
    option_name = "sport package"
    option_price = 3000.0

    def cost(self) -> float:
        return round(self._vehicle.cost() * 1.05 + self.option_price, 2)


@log_assembly
def build_premium_car() -> Vehicle:
    return Navigation(LeatherSeats(Sunroof(BasicCar("Sedan", 28000.0))))


def demo() -> List[str]:
    cars = [
        BasicCar(),
        Sunroof(BasicCar()),
        build_premium_car(),
        SportPackage(Sunroof(BasicCar("Coupe", 32000.0))),
    ]
    return [f"{car.description()}: ${car.cost():,.2f}" for car in cars]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Decorator pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
