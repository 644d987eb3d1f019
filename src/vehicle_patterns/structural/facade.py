"""Facade pattern - one button to start the car.

Intent:
    Provide a unified interface to a set of interfaces in a subsystem.

Starting a car involves the dashboard self-test, the fuel pump, the ignition,
the engine and the lights, in that order. ``CarFacade`` hides the sequence
behind ``start()`` and ``stop()``. The subsystems stay available for callers
that need finer control.
"""
from typing import List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class Dashboard:
    def self_test(self) -> str:
        return "Dashboard: warning lights self-test passed"

    def show_ready(self) -> str:
        return "Dashboard: READY"

    def power_down(self) -> str:
        return "Dashboard: display off"


class FuelPump:
    def __init__(self):
        self.pressurized = False

    def prime(self) -> str:
        self.pressurized = True
        return "Fuel pump: primed"

    def shut_off(self) -> str:
        self.pressurized = False
        return "Fuel pump: off"


class Ignition:
    def spark(self) -> str:
        return "Ignition: spark plugs firing"


class Engine:
    def __init__(self):
        self.running = False

    def crank(self) -> str:
        self.running = True
        return "Engine: running at 800 rpm"

    def shut_down(self) -> str:
        self.running = False
        return "Engine: stopped"


class Lights:
    def __init__(self):
        self.on = False

    def daytime_running(self) -> str:
        self.on = True
        return "Lights: daytime running lights on"

    def off(self) -> str:
        self.on = False
        return "Lights: off"


class CarFacade:
    """Facade over the start/stop subsystems."""

    def __init__(
        self,
        dashboard: Optional[Dashboard] = None,
        fuel_pump: Optional[FuelPump] = None,
        ignition: Optional[Ignition] = None,
        engine: Optional[Engine] = None,
        lights: Optional[Lights] = None,
    ):
        self.dashboard = dashboard or Dashboard()
        self.fuel_pump = fuel_pump or FuelPump()
        self.ignition = ignition or Ignition()
        self.engine = engine or Engine()
        self.lights = lights or Lights()

    @property
    def is_running(self) -> bool:
        return self.engine.running

    def start(self) -> List[str]:
        if self.is_running:
            logger.debug("Start requested while engine already running")
            return ["Car is already running"]
        return [
            self.dashboard.self_test(),
            self.fuel_pump.prime(),
            self.ignition.spark(),
            self.engine.crank(),
            self.lights.daytime_running(),
            self.dashboard.show_ready(),
        ]

    def stop(self) -> List[str]:
        if not self.is_running:
            return ["Car is already stopped"]
        return [
            self.engine.shut_down(),
            self.fuel_pump.shut_off(),
            self.lights.off(),
            self.dashboard.power_down(),
        ]


def demo() -> List[str]:
    car = CarFacade()
    return car.start() + car.start() + car.stop()


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Facade pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
