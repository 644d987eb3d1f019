"""Iterator pattern - walk a vehicle fleet without exposing its storage.

Intent:
    Provide a way to access the elements of an aggregate object
    sequentially without exposing its underlying representation.

Python builds the pattern into the language: any object with ``__iter__``
works in a ``for`` loop, and any object with ``__next__`` raising
``StopIteration`` is an iterator. ``FleetIterator`` spells the protocol out
by hand; ``VehicleFleet.by_type()`` shows the everyday shortcut, a
generator.
"""
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict

from vehicle_patterns.cli.example import run_example


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True)

    plate: str
    kind: str
    make: str


class FleetIterator:
    """Explicit iterator over a list snapshot."""

    def __init__(self, vehicles: List[Vehicle]):
        self._vehicles = vehicles
        self._index = 0

    def __iter__(self) -> "FleetIterator":
        return self

    def __next__(self) -> Vehicle:
        if self._index >= len(self._vehicles):
            raise StopIteration
        vehicle = self._vehicles[self._index]
        self._index += 1
        return vehicle


class ReverseFleetIterator(FleetIterator):
    def __init__(self, vehicles: List[Vehicle]):
        super().__init__(list(reversed(vehicles)))


class VehicleFleet:
    """Aggregate."""

    def __init__(self):
        self._vehicles: List[Vehicle] = []

    def add(self, vehicle: Vehicle) -> None:
        self._vehicles.append(vehicle)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> FleetIterator:
        return FleetIterator(list(self._vehicles))

    def reverse(self) -> ReverseFleetIterator:
        return ReverseFleetIterator(self._vehicles)

    def by_type(self, kind: str) -> Iterator[Vehicle]:
        for vehicle in self._vehicles:
            if vehicle.kind == kind:
                yield vehicle


def demo() -> List[str]:
    fleet = VehicleFleet()
    for plate, kind, make in [
        ("VAN-1", "van", "Ford"),
        ("CAR-1", "car", "Skoda"),
        ("CAR-2", "car", "Kia"),
        ("TRK-1", "truck", "MAN"),
    ]:
        fleet.add(Vehicle(plate=plate, kind=kind, make=make))

    return [
        f"Fleet size: {len(fleet)}",
        "In order: " + ", ".join(v.plate for v in fleet),
        "Reversed: " + ", ".join(v.plate for v in fleet.reverse()),
        "Cars only: " + ", ".join(f"{v.make} {v.plate}" for v in fleet.by_type("car")),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Iterator pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
