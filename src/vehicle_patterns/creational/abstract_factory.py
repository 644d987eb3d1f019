"""Abstract Factory pattern - families of matching vehicles.

Intent:
    Provide an interface for creating families of related objects without
    specifying their concrete classes.

Participants:
    - Car, Motorcycle: abstract products
    - ElectricCar/ElectricMotorcycle, PetrolCar/PetrolMotorcycle: concrete
      products, one pair per family
    - VehicleFactory: abstract factory with one creation method per product
    - ElectricVehicleFactory, PetrolVehicleFactory: concrete factories
    - get_factory(): picks a family by name

A client holding a VehicleFactory never mixes an electric car with a petrol
motorcycle by accident: every product it creates comes from the same family.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import InvalidVehicleTypeError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class Car(ABC):
    """Abstract car product."""

    @abstractmethod
    def describe(self) -> str:
        pass

    @abstractmethod
    def refuel(self) -> str:
        pass


class Motorcycle(ABC):
    """Abstract motorcycle product."""

    @abstractmethod
    def describe(self) -> str:
        pass

    @abstractmethod
    def refuel(self) -> str:
        pass


class ElectricCar(Car):
    def describe(self) -> str:
        return "Electric car with a 75 kWh battery"

    def refuel(self) -> str:
        return "Plugging the car into a fast charger"


class ElectricMotorcycle(Motorcycle):
    def describe(self) -> str:
        return "Electric motorcycle with a 15 kWh battery"

    def refuel(self) -> str:
        return "Plugging the motorcycle into a wall socket"


class PetrolCar(Car):
    def describe(self) -> str:
        return "Petrol car with a 2.0L engine"

    def refuel(self) -> str:
        return "Filling the car's 50 litre tank"


class PetrolMotorcycle(Motorcycle):
    def describe(self) -> str:
        return "Petrol motorcycle with a 650cc engine"

    def refuel(self) -> str:
        return "Filling the motorcycle's 15 litre tank"


class VehicleFactory(ABC):
    """Abstract factory for one family of vehicles."""

    @abstractmethod
    def create_car(self) -> Car:
        pass

    @abstractmethod
    def create_motorcycle(self) -> Motorcycle:
        pass


class ElectricVehicleFactory(VehicleFactory):
    def create_car(self) -> Car:
        return ElectricCar()

    def create_motorcycle(self) -> Motorcycle:
        return ElectricMotorcycle()


class PetrolVehicleFactory(VehicleFactory):
    def create_car(self) -> Car:
        return PetrolCar()

    def create_motorcycle(self) -> Motorcycle:
        return PetrolMotorcycle()


_FACTORIES: Dict[str, Callable[[], VehicleFactory]] = {
    "electric": ElectricVehicleFactory,
    "petrol": PetrolVehicleFactory,
}


def get_factory(kind: str) -> VehicleFactory:
    """
    Get the factory for a vehicle family.

    Args:
        kind: Family name, "electric" or "petrol" (case-insensitive)

    Returns:
        A concrete VehicleFactory

    Raises:
        InvalidVehicleTypeError: If the family is unknown
    """
    factory_class = _FACTORIES.get(kind.strip().lower())
    if factory_class is None:
        raise InvalidVehicleTypeError(kind, _FACTORIES.keys())
    logger.debug("Selected vehicle factory", kind=kind, factory=factory_class.__name__)
    return factory_class()


def describe_family(factory: VehicleFactory) -> List[str]:
    """Client code: only talks to the abstract interfaces."""
    car = factory.create_car()
    motorcycle = factory.create_motorcycle()
    return [
        f"{car.describe()} - {car.refuel()}",
        f"{motorcycle.describe()} - {motorcycle.refuel()}",
    ]


def demo() -> List[str]:
    lines: List[str] = []
    for kind in ("electric", "petrol"):
        lines.append(f"[{kind}]")
        lines.extend(describe_family(get_factory(kind)))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Abstract Factory pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
