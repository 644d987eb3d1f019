"""Observer pattern - gauges and warnings follow the speedometer.

Intent:
    Define a one-to-many dependency between objects so that when one object
    changes state, all its dependents are notified and updated
    automatically.

The ``Speedometer`` publishes a ``SpeedChanged`` event whenever its reading
changes. Observers attach and detach at runtime. A failing observer is
logged and skipped; the remaining observers still receive the event.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class SpeedChanged(BaseModel):
    """Event passed to observers."""
    model_config = ConfigDict(frozen=True)

    old_speed: int
    new_speed: int
    occurred_at: datetime = Field(default_factory=datetime.now)


class Observer(ABC):
    @abstractmethod
    def update(self, event: SpeedChanged) -> None:
        pass


class Speedometer:
    """Subject."""

    def __init__(self):
        self._observers: List[Observer] = []
        self._speed = 0

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: SpeedChanged) -> None:
        for observer in list(self._observers):
            try:
                observer.update(event)
            except Exception as e:
                logger.error("Observer failed", observer=type(observer).__name__, error=str(e))
                # Continue with other observers

    @property
    def speed(self) -> int:
        return self._speed

    @speed.setter
    def speed(self, value: int) -> None:
        if value < 0:
            raise ValidationError(f"Speed must not be negative, got {value}")
        if value == self._speed:
            return
        event = SpeedChanged(old_speed=self._speed, new_speed=value)
        self._speed = value
        self.notify(event)


class Dashboard(Observer):
    def __init__(self):
        self.display = "0 km/h"

    def update(self, event: SpeedChanged) -> None:
        self.display = f"{event.new_speed} km/h"


class SpeedLimitWarning(Observer):
    def __init__(self, limit: int):
        self.limit = limit
        self.warnings: List[str] = []

    def update(self, event: SpeedChanged) -> None:
        if event.new_speed > self.limit >= event.old_speed:
            self.warnings.append(f"Speed limit {self.limit} km/h exceeded: {event.new_speed} km/h")


class TripRecorder(Observer):
    def __init__(self):
        self.readings: List[int] = []

    def update(self, event: SpeedChanged) -> None:
        self.readings.append(event.new_speed)

    @property
    def top_speed(self) -> int:
        return max(self.readings, default=0)


def demo() -> List[str]:
    speedometer = Speedometer()
    dashboard = Dashboard()
    warning = SpeedLimitWarning(limit=100)
    recorder = TripRecorder()
    for observer in (dashboard, warning, recorder):
        speedometer.attach(observer)

    for speed in (50, 90, 120, 80):
        speedometer.speed = speed

    speedometer.detach(recorder)
    speedometer.speed = 60

    return [
        f"Dashboard shows: {dashboard.display}",
        *warning.warnings,
        f"Recorder readings (detached before last change): {recorder.readings}",
        f"Top speed: {recorder.top_speed} km/h",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Observer pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
