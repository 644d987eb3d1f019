"""Flyweight pattern - share vehicle models across a crowded parking lot.

Intent:
    Use sharing to support large numbers of fine-grained objects
    efficiently.

A parking lot holds thousands of cars but only a handful of distinct
make/model/color combinations. The combination (intrinsic state) lives in a
shared, immutable ``VehicleModel``; each ``ParkedVehicle`` keeps only what is
unique to it (plate and spot, the extrinsic state) plus a reference to the
shared model.

``VehicleModelFactory`` is the memoizing map that guarantees sharing: asking
twice for the same key returns the same object.
"""
import threading
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)

ModelKey = Tuple[str, str, str]


class VehicleModel(BaseModel):
    """Flyweight: intrinsic, shared, immutable."""
    model_config = ConfigDict(frozen=True)

    make: str
    model: str
    color: str

    def render(self, plate: str, spot: int) -> str:
        return f"Spot {spot:>3}: {self.color} {self.make} {self.model} [{plate}]"


class VehicleModelFactory:
    """Flyweight factory with a thread-safe cache."""

    def __init__(self):
        self._models: Dict[ModelKey, VehicleModel] = {}
        self._lock = threading.Lock()

    def get_model(self, make: str, model: str, color: str) -> VehicleModel:
        key = (make, model, color)
        cached = self._models.get(key)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._models.get(key)
            if cached is None:
                logger.debug("Creating shared vehicle model", make=make, model=model, color=color)
                cached = VehicleModel(make=make, model=model, color=color)
                self._models[key] = cached
        return cached

    @property
    def model_count(self) -> int:
        return len(self._models)


class ParkedVehicle:
    """Context: extrinsic state plus a reference to the flyweight."""

    __slots__ = ("plate", "spot", "model")

    def __init__(self, plate: str, spot: int, model: VehicleModel):
        self.plate = plate
        self.spot = spot
        self.model = model

    def render(self) -> str:
        return self.model.render(self.plate, self.spot)


class ParkingLot:
    def __init__(self, capacity: int, factory: Optional[VehicleModelFactory] = None):
        self.capacity = capacity
        self.factory = factory or VehicleModelFactory()
        self._vehicles: List[ParkedVehicle] = []

    def park(self, plate: str, make: str, model: str, color: str) -> ParkedVehicle:
        if len(self._vehicles) >= self.capacity:
            raise ValidationError(f"Parking lot is full ({self.capacity} spots)")
        vehicle = ParkedVehicle(plate, len(self._vehicles) + 1, self.factory.get_model(make, model, color))
        self._vehicles.append(vehicle)
        return vehicle

    @property
    def vehicles(self) -> List[ParkedVehicle]:
        return list(self._vehicles)


def demo() -> List[str]:
    lot = ParkingLot(capacity=100)
    catalogue = [("Toyota", "Corolla", "silver"), ("Honda", "Civic", "black"), ("Ford", "Fiesta", "red")]
    for number in range(12):
        make, model, color = catalogue[number % len(catalogue)]
        lot.park(f"PLT-{number:03d}", make, model, color)

    lines = [vehicle.render() for vehicle in lot.vehicles[:4]]
    lines.append(f"Parked vehicles: {len(lot.vehicles)}")
    lines.append(f"Shared vehicle models: {lot.factory.model_count}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Flyweight pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
