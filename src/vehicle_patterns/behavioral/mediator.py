"""Mediator pattern - an intersection controller coordinates the traffic.

Intent:
    Define an object that encapsulates how a set of objects interact.
    Mediator promotes loose coupling by keeping objects from referring to
    each other explicitly.

Vehicles never talk to each other. They ask the ``IntersectionController``
to cross and get told when it is their turn. Emergency vehicles jump the
queue; everyone else waits in arrival order until the intersection clears.
"""
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class TrafficMediator(ABC):
    @abstractmethod
    def register(self, vehicle: "Vehicle") -> None:
        pass

    @abstractmethod
    def request_crossing(self, vehicle: "Vehicle") -> None:
        pass

    @abstractmethod
    def leave(self, vehicle: "Vehicle") -> None:
        pass


class Vehicle:
    """Colleague."""

    is_emergency = False

    def __init__(self, name: str, mediator: TrafficMediator):
        self.name = name
        self.mediator = mediator
        self.messages: List[str] = []
        mediator.register(self)

    def request_crossing(self) -> None:
        self.mediator.request_crossing(self)

    def leave_intersection(self) -> None:
        self.mediator.leave(self)

    def receive(self, message: str) -> None:
        self.messages.append(message)


class Car(Vehicle):
    pass


class Ambulance(Vehicle):
    is_emergency = True


class IntersectionController(TrafficMediator):
    """Concrete mediator: one vehicle in the intersection at a time."""

    def __init__(self):
        self._vehicles: List[Vehicle] = []
        self._queue: Deque[Vehicle] = deque()
        self.occupant: Optional[Vehicle] = None
        self.log: List[str] = []

    def register(self, vehicle: Vehicle) -> None:
        self._vehicles.append(vehicle)

    def request_crossing(self, vehicle: Vehicle) -> None:
        if vehicle not in self._vehicles:
            raise ValidationError(f"{vehicle.name} is not registered with this intersection")
        if vehicle is self.occupant:
            raise ValidationError(f"{vehicle.name} is already in the intersection")
        if vehicle in self._queue:
            raise ValidationError(f"{vehicle.name} is already waiting")

        if self.occupant is None:
            self._grant(vehicle)
            return

        if vehicle.is_emergency:
            # Ahead of ordinary traffic, behind earlier emergencies
            position = sum(1 for waiting in self._queue if waiting.is_emergency)
            self._queue.insert(position, vehicle)
            self._broadcast(f"Emergency vehicle {vehicle.name} approaching, yield", exclude=vehicle)
        else:
            self._queue.append(vehicle)
        vehicle.receive("Wait")
        self.log.append(f"{vehicle.name} waits (queue: {len(self._queue)})")

    def leave(self, vehicle: Vehicle) -> None:
        if self.occupant is not vehicle:
            raise ValidationError(f"{vehicle.name} is not in the intersection")
        self.occupant = None
        self.log.append(f"{vehicle.name} cleared the intersection")
        if self._queue:
            self._grant(self._queue.popleft())

    def _grant(self, vehicle: Vehicle) -> None:
        self.occupant = vehicle
        vehicle.receive("Go")
        self.log.append(f"{vehicle.name} crosses")
        logger.debug("Crossing granted", vehicle=vehicle.name, waiting=len(self._queue))

    def _broadcast(self, message: str, exclude: Vehicle) -> None:
        for vehicle in self._vehicles:
            if vehicle is not exclude:
                vehicle.receive(message)


def demo() -> List[str]:
    controller = IntersectionController()
    sedan = Car("Sedan", controller)
    taxi = Car("Taxi", controller)
    ambulance = Ambulance("Ambulance", controller)

    sedan.request_crossing()
    taxi.request_crossing()
    ambulance.request_crossing()
    sedan.leave_intersection()
    ambulance.leave_intersection()
    taxi.leave_intersection()

    return controller.log + [f"Taxi heard: {', '.join(taxi.messages)}"]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Mediator pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
