"""Adapter pattern - charge an electric car at a fuel station.

Intent:
    Convert the interface of a class into another interface clients expect.

The fuel station only knows ``FuelVehicle.refuel(litres)``. An ``ElectricCar``
only knows ``charge(kwh)``. ``ElectricCarAdapter`` wraps the electric car,
implements the fuel interface, and converts litres to the energy-equivalent
kilowatt-hours.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)

# Energy content of one litre of petrol, in kWh.
KWH_PER_LITRE = 8.9


def _require_non_negative(amount: float, unit: str) -> None:
    if amount < 0:
        raise ValidationError(f"Amount must not be negative: {amount} {unit}")


class FuelVehicle(ABC):
    """Target interface."""

    @abstractmethod
    def refuel(self, litres: float) -> str:
        pass


class PetrolCar(FuelVehicle):
    def __init__(self, name: str):
        self.name = name
        self.fuel_litres = 0.0

    def refuel(self, litres: float) -> str:
        _require_non_negative(litres, "litres")
        self.fuel_litres += litres
        return f"{self.name}: added {litres:.1f} L of petrol"


class ElectricCar:
    """Adaptee with an incompatible interface."""

    def __init__(self, name: str, capacity_kwh: float = 75.0):
        self.name = name
        self.capacity_kwh = capacity_kwh
        self.charge_kwh = 0.0

    def charge(self, kwh: float) -> str:
        _require_non_negative(kwh, "kWh")
        accepted = min(kwh, self.capacity_kwh - self.charge_kwh)
        self.charge_kwh += accepted
        return f"{self.name}: charged {accepted:.1f} kWh (battery {self.charge_kwh:.1f}/{self.capacity_kwh:.0f} kWh)"


class ElectricCarAdapter(FuelVehicle):
    """Object adapter: holds an ElectricCar and speaks FuelVehicle."""

    def __init__(self, car: ElectricCar):
        self._car = car

    def refuel(self, litres: float) -> str:
        _require_non_negative(litres, "litres")
        kwh = litres * KWH_PER_LITRE
        logger.debug("Converted litres to kWh", litres=litres, kwh=kwh)
        return self._car.charge(kwh)


class FuelStation:
    """Client: works with anything that implements FuelVehicle."""

    def service(self, vehicle: FuelVehicle, litres: float) -> str:
        return vehicle.refuel(litres)


def demo() -> List[str]:
    station = FuelStation()
    tesla = ElectricCar("Tesla Model 3", capacity_kwh=60.0)
    return [
        station.service(PetrolCar("Ford Focus"), 40),
        station.service(ElectricCarAdapter(tesla), 5),
        station.service(ElectricCarAdapter(tesla), 5),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Adapter pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
