"""Factory Method pattern - let subclasses decide which vehicle to create.

Intent:
    Define an interface for creating an object, but let subclasses decide
    which class to instantiate.

This module shows the two shapes the pattern usually takes:

- a simple static factory, ``VehicleFactory.create_vehicle(type)``, that maps
  a type name to a class and rejects names it does not know;
- the classic creator hierarchy: ``Dealership.sell_vehicle()`` is written
  once against the abstract ``create_vehicle()`` factory method, and each
  dealership subclass overrides only that one method.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import InvalidVehicleTypeError, ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class Vehicle(ABC):
    """Product interface."""

    wheels: int = 4

    @abstractmethod
    def deliver(self) -> str:
        pass


class Car(Vehicle):
    wheels = 4

    def deliver(self) -> str:
        return "Car delivered on a flatbed trailer"


class Truck(Vehicle):
    wheels = 18

    def deliver(self) -> str:
        return "Truck driven to the customer's depot"


class Motorcycle(Vehicle):
    wheels = 2

    def deliver(self) -> str:
        return "Motorcycle delivered in a crate"


class VehicleFactory:
    """Static factory keyed by vehicle type name."""

    _vehicle_types: Dict[str, Type[Vehicle]] = {
        "car": Car,
        "truck": Truck,
        "motorcycle": Motorcycle,
    }

    @classmethod
    def register_vehicle_type(cls, name: str, vehicle_class: Type[Vehicle]) -> None:
        """Register a new vehicle type without touching create_vehicle()."""
        if not (isinstance(vehicle_class, type) and issubclass(vehicle_class, Vehicle)):
            raise ValidationError(f"{vehicle_class!r} is not a Vehicle subclass")
        cls._vehicle_types[name.strip().lower()] = vehicle_class
        logger.debug("Registered vehicle type", name=name, vehicle_class=vehicle_class.__name__)

    @classmethod
    def supported_types(cls) -> List[str]:
        return sorted(cls._vehicle_types)

    @classmethod
    def create_vehicle(cls, vehicle_type: str) -> Vehicle:
        """
        Create a vehicle by type name.

        Raises:
            InvalidVehicleTypeError: If the type is not registered
        """
        vehicle_class = cls._vehicle_types.get(vehicle_type.strip().lower())
        if vehicle_class is None:
            raise InvalidVehicleTypeError(vehicle_type, cls._vehicle_types.keys())
        return vehicle_class()


class Dealership(ABC):
    """Creator. sell_vehicle() depends only on the factory method."""

    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        pass

    def sell_vehicle(self, customer: str) -> str:
        vehicle = self.create_vehicle()
        return (
            f"{type(self).__name__} sold a {type(vehicle).__name__.lower()} "
            f"({vehicle.wheels} wheels) to {customer}: {vehicle.deliver()}"
        )


class CarDealership(Dealership):
    def create_vehicle(self) -> Vehicle:
        return Car()


class TruckDealership(Dealership):
    def create_vehicle(self) -> Vehicle:
        return Truck()


def demo() -> List[str]:
    lines = []
    for vehicle_type in ("car", "Truck", "MOTORCYCLE"):
        vehicle = VehicleFactory.create_vehicle(vehicle_type)
        lines.append(f"create_vehicle({vehicle_type!r}) -> {type(vehicle).__name__}")

    try:
        VehicleFactory.create_vehicle("spaceship")
    except InvalidVehicleTypeError as e:
        lines.append(f"create_vehicle('spaceship') -> {e}")

    lines.append(CarDealership().sell_vehicle("Alice"))
    lines.append(TruckDealership().sell_vehicle("Bob"))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Factory Method pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
