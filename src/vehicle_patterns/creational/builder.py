"""Builder pattern - assemble a complex Car step by step.

Intent:
    Separate the construction of a complex object from its representation,
    so the same construction process can produce different representations.

Participants:
    - Car: the product, an immutable record once built
    - CarBuilder: collects parts through a fluent interface and validates
      the result in ``build()``
    - CarDirector: knows fixed recipes (sports car, family car) and drives a
      builder through them

When to use:
    A constructor with many optional arguments is hard to read and easy to
    misuse. A builder names every step, lets callers skip the optional ones,
    and checks the required ones once at the end.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class Car(BaseModel):
    """The product. Frozen so a built car cannot change behind the builder's back."""
    model_config = ConfigDict(frozen=True)

    make: str
    model: str
    color: str = "white"
    engine: str = "1.6L petrol"
    seats: int = 5
    wheels: int = 4
    gps: bool = False
    sunroof: bool = False

    def describe(self) -> str:
        extras = [name for name, enabled in (("GPS", self.gps), ("sunroof", self.sunroof)) if enabled]
        extras_text = f" with {' and '.join(extras)}" if extras else ""
        return (
            f"{self.color} {self.make} {self.model}, {self.engine}, "
            f"{self.seats} seats{extras_text}"
        )


class CarBuilder:
    """Fluent builder for Car."""

    def __init__(self):
        self.reset()

    def reset(self) -> "CarBuilder":
        self._parts: dict = {}
        return self

    def with_make(self, make: str) -> "CarBuilder":
        self._parts["make"] = make
        return self

    def with_model(self, model: str) -> "CarBuilder":
        self._parts["model"] = model
        return self

    def with_color(self, color: str) -> "CarBuilder":
        self._parts["color"] = color
        return self

    def with_engine(self, engine: str) -> "CarBuilder":
        self._parts["engine"] = engine
        return self

    def with_seats(self, seats: int) -> "CarBuilder":
        self._parts["seats"] = seats
        return self

    def with_gps(self, enabled: bool = True) -> "CarBuilder":
        self._parts["gps"] = enabled
        return self

    def with_sunroof(self, enabled: bool = True) -> "CarBuilder":
        self._parts["sunroof"] = enabled
        return self

    def build(self) -> Car:
        """
        Validate the collected parts and produce a Car.

        The builder is reset afterwards, so it can be reused for the next car.

        Raises:
            ValidationError: If make or model is missing, or seats < 1
        """
        missing: List[str] = [name for name in ("make", "model") if not self._parts.get(name)]
        if missing:
            raise ValidationError(f"Cannot build car, missing: {', '.join(missing)}", missing)

        seats: Optional[int] = self._parts.get("seats")
        if seats is not None and seats < 1:
            raise ValidationError(f"A car needs at least one seat, got {seats}")

        car = Car(**self._parts)
        logger.debug("Car built", make=car.make, model=car.model)
        self.reset()
        return car


class CarDirector:
    """Knows the recipes; the builder knows how to hold the parts."""

    @staticmethod
    def build_sports_car(builder: CarBuilder) -> Car:
        return (
            builder.reset()
            .with_make("Porsche")
            .with_model("911")
            .with_color("red")
            .with_engine("3.0L twin-turbo")
            .with_seats(2)
            .with_gps()
            .build()
        )

    @staticmethod
    def build_family_car(builder: CarBuilder) -> Car:
        return (
            builder.reset()
            .with_make("Volvo")
            .with_model("XC90")
            .with_color("blue")
            .with_engine("2.0L hybrid")
            .with_seats(7)
            .with_gps()
            .with_sunroof()
            .build()
        )


def demo() -> List[str]:
    builder = CarBuilder()
    sports = CarDirector.build_sports_car(builder)
    family = CarDirector.build_family_car(builder)
    custom = builder.with_make("Fiat").with_model("500").with_color("yellow").build()
    return [
        f"Sports car: {sports.describe()}",
        f"Family car: {family.describe()}",
        f"Custom car: {custom.describe()}",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Builder pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
