import pytest

from vehicle_patterns.structural.decorator import (
    BasicCar,
    LeatherSeats,
    Navigation,
    SportPackage,
    Sunroof,
    build_premium_car,
)


def test_basic_car():
    car = BasicCar()

    assert car.description() == "Hatchback"
    assert car.cost() == 20000.0


def test_options_stack():
    car = LeatherSeats(Sunroof(BasicCar()))

    assert car.description() == "Hatchback + sunroof + leather seats"
    assert car.cost() == pytest.approx(23000.0)


def test_same_option_can_be_applied_twice():
    assert Navigation(Navigation(BasicCar())).cost() == pytest.approx(21500.0)


def test_sport_package_scales_wrapped_cost():
    car = SportPackage(Sunroof(BasicCar("Coupe", 32000.0)))

    assert car.cost() == pytest.approx(37860.0)


def test_function_decorator_keeps_metadata(debug_logs):
    car = build_premium_car()

    assert build_premium_car.__name__ == "build_premium_car"
    assert car.cost() == pytest.approx(31750.0)
    assert "Assembly step finished" in debug_logs.text
