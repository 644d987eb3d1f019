"""Visitor pattern - toll booths and inspectors visit the fleet.

Intent:
    Represent an operation to be performed on the elements of an object
    structure. Visitor lets you define a new operation without changing the
    classes of the elements on which it operates.

Each vehicle class implements ``accept(visitor)`` by calling the matching
``visit_*`` method: that is the double dispatch. Adding a new operation
(tolls, inspections, insurance) means adding a visitor, not touching
``Car``, ``Truck`` or ``Motorcycle``.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class VehicleElement(ABC):
    def __init__(self, plate: str):
        self.plate = plate

    @abstractmethod
    def accept(self, visitor: "VehicleVisitor") -> Any:
        pass


class Car(VehicleElement):
    def __init__(self, plate: str, passengers: int = 1):
        super().__init__(plate)
        self.passengers = passengers

    def accept(self, visitor: "VehicleVisitor") -> Any:
        return visitor.visit_car(self)


class Truck(VehicleElement):
    def __init__(self, plate: str, axles: int = 2, load_tonnes: float = 0.0):
        super().__init__(plate)
        self.axles = axles
        self.load_tonnes = load_tonnes

    def accept(self, visitor: "VehicleVisitor") -> Any:
        return visitor.visit_truck(self)


class Motorcycle(VehicleElement):
    def __init__(self, plate: str, engine_cc: int = 125):
        super().__init__(plate)
        self.engine_cc = engine_cc

    def accept(self, visitor: "VehicleVisitor") -> Any:
        return visitor.visit_motorcycle(self)


class VehicleVisitor(ABC):
    @abstractmethod
    def visit_car(self, car: Car) -> Any:
        pass

    @abstractmethod
    def visit_truck(self, truck: Truck) -> Any:
        pass

    @abstractmethod
    def visit_motorcycle(self, motorcycle: Motorcycle) -> Any:
        pass


class TollCalculator(VehicleVisitor):
    """Accumulates the toll for every vehicle it visits."""

    CAR_TOLL = 5.0
    CARPOOL_DISCOUNT = 0.5
    TRUCK_TOLL_PER_AXLE = 4.0
    MOTORCYCLE_TOLL = 2.5

    def __init__(self):
        self.total = 0.0

    def _charge(self, amount: float) -> float:
        self.total += amount
        return amount

    def visit_car(self, car: Car) -> float:
        toll = self.CAR_TOLL * (self.CARPOOL_DISCOUNT if car.passengers >= 3 else 1.0)
        return self._charge(toll)

    def visit_truck(self, truck: Truck) -> float:
        return self._charge(self.TRUCK_TOLL_PER_AXLE * truck.axles)

    def visit_motorcycle(self, motorcycle: Motorcycle) -> float:
        return self._charge(self.MOTORCYCLE_TOLL)


class InspectionVisitor(VehicleVisitor):
    """Produces one report line per vehicle."""

    MAX_TONNES_PER_AXLE = 10.0

    def __init__(self):
        self.report: List[str] = []

    def visit_car(self, car: Car) -> str:
        line = f"{car.plate}: car checked (lights, brakes, tires)"
        self.report.append(line)
        return line

    def visit_truck(self, truck: Truck) -> str:
        overloaded = truck.load_tonnes > truck.axles * self.MAX_TONNES_PER_AXLE
        line = f"{truck.plate}: truck {'OVERLOADED' if overloaded else 'load OK'} ({truck.load_tonnes:g} t on {truck.axles} axles)"
        if overloaded:
            logger.debug("Overloaded truck found", plate=truck.plate, load=truck.load_tonnes)
        self.report.append(line)
        return line

    def visit_motorcycle(self, motorcycle: Motorcycle) -> str:
        line = f"{motorcycle.plate}: motorcycle checked ({motorcycle.engine_cc}cc, helmet lock)"
        self.report.append(line)
        return line


def demo() -> List[str]:
    traffic: List[VehicleElement] = [
        Car("CAR-001"),
        Car("POOL-77", passengers=4),
        Truck("TRK-500", axles=3, load_tonnes=24),
        Truck("TRK-900", axles=2, load_tonnes=26),
        Motorcycle("MOTO-9", engine_cc=600),
    ]

    tolls = TollCalculator()
    inspector = InspectionVisitor()
    for vehicle in traffic:
        vehicle.accept(tolls)
        vehicle.accept(inspector)

    return inspector.report + [f"Total tolls collected: ${tolls.total:.2f}"]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Visitor pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
