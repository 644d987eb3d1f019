"""Singleton pattern - one vehicle licensing office per process.

Intent:
    Ensure a class has only one instance, and provide a global point of
    access to it.

``VehicleRegistry.get_instance()`` uses double-checked locking: the common
path reads the class attribute without taking the lock, and only the first
callers race for the lock, re-checking once inside it so exactly one instance
is ever constructed.

Direct construction is still possible (useful in tests); the pattern is the
access point, not a ban on ``__init__``.
"""
import threading
from typing import Dict, List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ResourceNotFoundError, ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class VehicleRegistry:
    """Process-wide registry of licence plates and their owners."""

    _instance: Optional["VehicleRegistry"] = None
    _lock = threading.Lock()

    def __init__(self):
        self._owners: Dict[str, str] = {}
        self._owners_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "VehicleRegistry":
        """Get the shared registry, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    logger.debug("Creating VehicleRegistry instance")
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance. Intended for tests."""
        with cls._lock:
            cls._instance = None

    def register_vehicle(self, plate: str, owner: str) -> None:
        """
        Register a plate to an owner.

        Raises:
            ValidationError: If the plate is blank or already registered
        """
        plate = plate.strip().upper()
        if not plate:
            raise ValidationError("Licence plate must not be empty")
        with self._owners_lock:
            if plate in self._owners:
                raise ValidationError(f"Plate {plate} is already registered to {self._owners[plate]}")
            self._owners[plate] = owner

    def owner_of(self, plate: str) -> str:
        owner = self._owners.get(plate.strip().upper())
        if owner is None:
            raise ResourceNotFoundError("Vehicle", plate)
        return owner

    @property
    def count(self) -> int:
        return len(self._owners)


def demo() -> List[str]:
    VehicleRegistry.reset_instance()

    office_a = VehicleRegistry.get_instance()
    office_b = VehicleRegistry.get_instance()
    office_a.register_vehicle("ab-123", "Alice")
    office_b.register_vehicle("CD-456", "Bob")

    lines = [
        f"Same instance: {office_a is office_b}",
        f"Registered vehicles: {office_b.count}",
        f"Owner of AB-123 (looked up via second handle): {office_b.owner_of('AB-123')}",
    ]
    try:
        office_b.register_vehicle("AB-123", "Mallory")
    except ValidationError as e:
        lines.append(f"Duplicate registration rejected: {e}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Singleton pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
