import pytest

from vehicle_patterns.behavioral.state import Car
from vehicle_patterns.domain.exceptions import InvalidStateTransitionError, ValidationError


@pytest.fixture
def car():
    return Car()


def test_starts_parked(car):
    assert car.state == "parked"
    assert car.speed == 0


def test_full_trip(car):
    car.start_engine()
    assert car.state == "idling"

    assert car.accelerate(30) == "Pulling away at 30 km/h"
    assert car.state == "driving"

    assert car.brake(10) == "Slowing down to 20 km/h"
    assert car.brake(50) == "Came to a halt"
    assert car.state == "idling"

    car.stop_engine()
    assert car.state == "parked"


def test_reverse_from_idling(car):
    car.start_engine()
    car.reverse()

    assert car.state == "reversing"
    assert car.brake() == "Stopped reversing"
    assert car.state == "idling"


def test_parked_car_refuses_to_accelerate(car):
    with pytest.raises(InvalidStateTransitionError) as exc_info:
        car.accelerate()

    assert str(exc_info.value) == "Cannot accelerate while parked"
    assert car.state == "parked"


@pytest.mark.parametrize("action", ["stop_engine", "reverse", "start_engine"])
def test_invalid_actions_while_driving(car, action):
    car.start_engine()
    car.accelerate()

    with pytest.raises(InvalidStateTransitionError):
        getattr(car, action)()
    assert car.state == "driving"


def test_non_positive_amount_rejected(car):
    car.start_engine()

    with pytest.raises(ValidationError):
        car.accelerate(0)
    with pytest.raises(ValidationError):
        car.brake(-5)
