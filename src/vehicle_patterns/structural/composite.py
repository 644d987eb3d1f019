"""Composite pattern - a vehicle as a tree of parts.

Intent:
    Compose objects into tree structures to represent part-whole
    hierarchies, and let clients treat individual objects and compositions
    uniformly.

A ``Part`` (leaf) has its own price and weight. An ``Assembly`` (composite)
holds parts and other assemblies and sums its children. Callers ask any node
for ``price()`` or ``weight()`` without caring which kind it is.
"""
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ResourceNotFoundError, ValidationError


class VehiclePart(ABC):
    """Component."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def price(self) -> float:
        pass

    @abstractmethod
    def weight(self) -> float:
        pass

    @abstractmethod
    def describe(self, indent: int = 0) -> List[str]:
        pass


class Part(VehiclePart):
    """Leaf."""

    def __init__(self, name: str, price: float, weight: float):
        super().__init__(name)
        if price < 0 or weight < 0:
            raise ValidationError(f"Part {name} must have non-negative price and weight")
        self._price = price
        self._weight = weight

    def price(self) -> float:
        return self._price

    def weight(self) -> float:
        return self._weight

    def describe(self, indent: int = 0) -> List[str]:
        return [f"{'  ' * indent}- {self.name}: ${self._price:,.2f}, {self._weight:g} kg"]


class Assembly(VehiclePart):
    """Composite."""

    def __init__(self, name: str, parts: Optional[List[VehiclePart]] = None):
        super().__init__(name)
        self._children: List[VehiclePart] = []
        for part in parts or []:
            self.add(part)

    def add(self, part: VehiclePart) -> "Assembly":
        if part is self or (isinstance(part, Assembly) and self in part.walk()):
            raise ValidationError(f"Adding {part.name} to {self.name} would create a cycle")
        self._children.append(part)
        return self

    def remove(self, part: VehiclePart) -> None:
        if part not in self._children:
            raise ResourceNotFoundError("Part", part.name)
        self._children.remove(part)

    def children(self) -> List[VehiclePart]:
        return list(self._children)

    def walk(self) -> Iterator[VehiclePart]:
        """Yield every node below this assembly, depth first."""
        for child in self._children:
            yield child
            if isinstance(child, Assembly):
                yield from child.walk()

    def price(self) -> float:
        return sum(child.price() for child in self._children)

    def weight(self) -> float:
        return sum(child.weight() for child in self._children)

    def describe(self, indent: int = 0) -> List[str]:
        lines = [f"{'  ' * indent}+ {self.name}: ${self.price():,.2f}, {self.weight():g} kg"]
        for child in self._children:
            lines.extend(child.describe(indent + 1))
        return lines


def build_car() -> Assembly:
    def wheel(position: str) -> Assembly:
        return Assembly(f"{position} wheel", [Part("tire", 120.0, 9.0), Part("rim", 200.0, 10.0)])

    engine = Assembly("engine", [
        Part("engine block", 2500.0, 90.0),
        Part("turbocharger", 900.0, 8.0),
    ])
    return Assembly("car", [
        Part("chassis", 3000.0, 300.0),
        engine,
        Assembly("wheels", [wheel(p) for p in ("front left", "front right", "rear left", "rear right")]),
    ])


def demo() -> List[str]:
    car = build_car()
    lines = car.describe()
    lines.append(f"Total: ${car.price():,.2f}, {car.weight():g} kg")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Composite pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
