"""Strategy pattern - interchangeable driving modes.

Intent:
    Define a family of algorithms, encapsulate each one, and make them
    interchangeable. Strategy lets the algorithm vary independently from
    clients that use it.

A ``Car`` delegates trip estimates to its current ``DrivingMode``. Eco,
Comfort and Sport trade speed for consumption differently, and the driver can
switch modes between trips without the car knowing which one it has.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ResourceNotFoundError, ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class TripEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: str
    distance_km: float
    litres: float
    cost: float
    hours: float

    def summary(self) -> str:
        return (
            f"{self.mode:<7} {self.distance_km:g} km: {self.litres:.1f} L, "
            f"${self.cost:.2f}, {self.hours:.2f} h"
        )


class DrivingMode(ABC):
    """Strategy."""

    name = ""
    top_speed = 0
    litres_per_100km = 0.0

    def consumption(self, distance_km: float) -> float:
        return distance_km * self.litres_per_100km / 100

    @abstractmethod
    def average_speed(self) -> float:
        """Average speed over a mixed route, in km/h."""


class EcoMode(DrivingMode):
    name = "eco"
    top_speed = 110
    litres_per_100km = 4.8

    def average_speed(self) -> float:
        return self.top_speed * 0.7


class ComfortMode(DrivingMode):
    name = "comfort"
    top_speed = 130
    litres_per_100km = 6.0

    def average_speed(self) -> float:
        return self.top_speed * 0.75


class SportMode(DrivingMode):
    name = "sport"
    top_speed = 180
    litres_per_100km = 9.5

    def average_speed(self) -> float:
        return self.top_speed * 0.65


MODES: Dict[str, type] = {mode.name: mode for mode in (EcoMode, ComfortMode, SportMode)}


def get_mode(name: str) -> DrivingMode:
    mode_class = MODES.get(name.lower())
    if mode_class is None:
        raise ResourceNotFoundError("Driving mode", name)
    return mode_class()


class Car:
    """Context."""

    def __init__(self, mode: Optional[DrivingMode] = None):
        self.mode = mode or ComfortMode()

    def set_mode(self, mode: DrivingMode) -> None:
        logger.debug("Driving mode changed", old=self.mode.name, new=mode.name)
        self.mode = mode

    def trip_estimate(self, distance_km: float, fuel_price: float) -> TripEstimate:
        if distance_km < 0:
            raise ValidationError(f"Distance must not be negative, got {distance_km}")
        if fuel_price < 0:
            raise ValidationError(f"Fuel price must not be negative, got {fuel_price}")
        litres = self.mode.consumption(distance_km)
        return TripEstimate(
            mode=self.mode.name,
            distance_km=distance_km,
            litres=round(litres, 2),
            cost=round(litres * fuel_price, 2),
            hours=round(distance_km / self.mode.average_speed(), 2),
        )


def demo() -> List[str]:
    car = Car()
    lines = []
    for name in ("eco", "comfort", "sport"):
        car.set_mode(get_mode(name))
        lines.append(car.trip_estimate(300, fuel_price=1.80).summary())
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Strategy pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
