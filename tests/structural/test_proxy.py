import pytest

from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.structural.proxy import MINIMUM_DRIVING_AGE, CarProxy, Driver


def test_adult_may_drive():
    proxy = CarProxy(Driver("Anna", 34))

    assert not proxy.car_created
    assert proxy.drive() == "Anna is driving the car"
    assert proxy.car_created


def test_underage_driver_is_refused():
    proxy = CarProxy(Driver("Tom", 15))

    assert proxy.drive() == "Sorry, Tom is too young to drive (15 < 16)"
    assert not proxy.car_created


def test_minimum_age_is_allowed():
    assert CarProxy(Driver("Sam", MINIMUM_DRIVING_AGE)).drive() == "Sam is driving the car"


def test_negative_age_rejected():
    with pytest.raises(ValidationError):
        Driver("Nobody", -1)
