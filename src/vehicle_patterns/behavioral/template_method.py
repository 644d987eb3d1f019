"""Template Method pattern - one assembly line, many vehicles.

Intent:
    Define the skeleton of an algorithm in an operation, deferring some
    steps to subclasses. Template Method lets subclasses redefine certain
    steps of an algorithm without changing the algorithm's structure.

``VehicleAssembly.assemble()`` fixes the order: chassis, engine, wheels,
paint, extras, inspection. Subclasses fill in the abstract steps and may
override the ``add_extras`` hook, which does nothing by default.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class VehicleAssembly(ABC):
    vehicle_name = "vehicle"

    def assemble(self) -> List[str]:
        """The template method. Subclasses should not override it."""
        logger.debug("Assembly started", vehicle=self.vehicle_name)
        steps = [
            self.build_chassis(),
            self.install_engine(),
            self.attach_wheels(),
            self.paint(),
        ]
        steps.extend(self.add_extras())
        steps.append(self.inspect())
        return steps

    @abstractmethod
    def build_chassis(self) -> str:
        pass

    @abstractmethod
    def install_engine(self) -> str:
        pass

    @abstractmethod
    def attach_wheels(self) -> str:
        pass

    def paint(self) -> str:
        return f"Painting the {self.vehicle_name} in factory white"

    def add_extras(self) -> List[str]:
        """Hook: no extras unless a subclass adds some."""
        return []

    def inspect(self) -> str:
        return f"Quality inspection passed for the {self.vehicle_name}"


class CarAssembly(VehicleAssembly):
    vehicle_name = "car"

    def build_chassis(self) -> str:
        return "Welding a unibody car chassis"

    def install_engine(self) -> str:
        return "Installing a 1.5L four-cylinder engine"

    def attach_wheels(self) -> str:
        return "Attaching 4 wheels"

    def add_extras(self) -> List[str]:
        return ["Fitting air conditioning", "Installing infotainment system"]


class MotorcycleAssembly(VehicleAssembly):
    vehicle_name = "motorcycle"

    def build_chassis(self) -> str:
        return "Building a tubular steel frame"

    def install_engine(self) -> str:
        return "Installing a 650cc twin engine"

    def attach_wheels(self) -> str:
        return "Attaching 2 wheels"

    def paint(self) -> str:
        return "Painting the tank in racing green"


class TruckAssembly(VehicleAssembly):
    vehicle_name = "truck"

    def build_chassis(self) -> str:
        return "Riveting a ladder-frame truck chassis"

    def install_engine(self) -> str:
        return "Installing a 13L diesel engine"

    def attach_wheels(self) -> str:
        return "Attaching 18 wheels"

    def add_extras(self) -> List[str]:
        return ["Mounting the sleeper cab"]


def demo() -> List[str]:
    lines = []
    for assembly in (CarAssembly(), MotorcycleAssembly(), TruckAssembly()):
        lines.append(f"-- {assembly.vehicle_name} --")
        lines.extend(assembly.assemble())
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Template Method pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
