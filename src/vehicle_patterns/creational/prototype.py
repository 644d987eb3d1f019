"""Prototype pattern - new vehicles by cloning configured ones.

Intent:
    Specify the kinds of objects to create using a prototypical instance,
    and create new objects by copying this prototype.

A fleet operator configures a reference car or bus once and stamps out
copies, overriding only what differs (plate, color). Clones are deep copies:
editing the options of a clone never leaks into the prototype.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ResourceNotFoundError, ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class VehiclePrototype(BaseModel):
    """Base prototype."""

    make: str
    model: str
    color: str = "white"
    plate: Optional[str] = None
    options: List[str] = Field(default_factory=list)

    def clone(self, **overrides: Any) -> "VehiclePrototype":
        """
        Deep-copy this vehicle, applying field overrides.

        Raises:
            ValidationError: If an override names an unknown field or fails validation
        """
        unknown = set(overrides) - set(type(self).model_fields)
        if unknown:
            raise ValidationError(f"Unknown fields for {type(self).__name__}: {sorted(unknown)}")
        try:
            return type(self).model_validate({**self.model_dump(), **overrides})
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid override for {type(self).__name__}", e.errors()) from e

    def describe(self) -> str:
        options = ", ".join(self.options) if self.options else "no options"
        return f"{self.color} {self.make} {self.model} [{self.plate or 'unregistered'}] ({options})"


class Car(VehiclePrototype):
    doors: int = 4


class Bus(VehiclePrototype):
    capacity: int = 50
    route: Optional[str] = None

    def describe(self) -> str:
        return f"{super().describe()} seats {self.capacity} on route {self.route or 'unassigned'}"


class PrototypeRegistry:
    """Named prototypes to clone from."""

    def __init__(self):
        self._prototypes: Dict[str, VehiclePrototype] = {}

    def register(self, name: str, prototype: VehiclePrototype) -> None:
        self._prototypes[name] = prototype
        logger.debug("Registered prototype", name=name, kind=type(prototype).__name__)

    def unregister(self, name: str) -> None:
        if self._prototypes.pop(name, None) is None:
            raise ResourceNotFoundError("Prototype", name)

    def names(self) -> List[str]:
        return sorted(self._prototypes)

    def create(self, name: str, **overrides: Any) -> VehiclePrototype:
        prototype = self._prototypes.get(name)
        if prototype is None:
            raise ResourceNotFoundError("Prototype", name)
        return prototype.clone(**overrides)


def demo() -> List[str]:
    registry = PrototypeRegistry()
    registry.register("taxi", Car(make="Toyota", model="Prius", color="yellow", options=["meter", "roof sign"]))
    registry.register("city-bus", Bus(make="Volvo", model="7900", color="red", options=["ramp"], capacity=70))

    taxi_1 = registry.create("taxi", plate="TX-001")
    taxi_2 = registry.create("taxi", plate="TX-002")
    taxi_2.options.append("child seat")
    bus = registry.create("city-bus", plate="BUS-42", route="Line 7")

    return [
        f"Taxi 1: {taxi_1.describe()}",
        f"Taxi 2: {taxi_2.describe()}",
        f"Bus: {bus.describe()}",
        f"Prototype taxi unchanged: {registry.create('taxi').describe()}",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Prototype pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
