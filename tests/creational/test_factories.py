import pytest

from vehicle_patterns.creational import abstract_factory, factory_method
from vehicle_patterns.creational.abstract_factory import (
    ElectricVehicleFactory,
    PetrolVehicleFactory,
    describe_family,
    get_factory,
)
from vehicle_patterns.creational.factory_method import (
    Car,
    CarDealership,
    Motorcycle,
    Truck,
    TruckDealership,
    Vehicle,
    VehicleFactory,
)
from vehicle_patterns.domain.exceptions import InvalidVehicleTypeError, ValidationError


class TestAbstractFactory:
    @pytest.mark.parametrize("kind,factory_class", [
        ("electric", ElectricVehicleFactory),
        ("PETROL", PetrolVehicleFactory),
    ])
    def test_get_factory(self, kind, factory_class):
        assert isinstance(get_factory(kind), factory_class)

    def test_products_belong_to_one_family(self):
        factory = get_factory("electric")

        assert isinstance(factory.create_car(), abstract_factory.ElectricCar)
        assert isinstance(factory.create_motorcycle(), abstract_factory.ElectricMotorcycle)

    def test_unknown_family(self):
        with pytest.raises(InvalidVehicleTypeError) as exc_info:
            get_factory("steam")

        assert str(exc_info.value) == "Invalid vehicle type: steam"
        assert exc_info.value.supported == ["electric", "petrol"]

    def test_client_uses_abstract_interface(self):
        lines = describe_family(PetrolVehicleFactory())
        assert lines == [
            "Petrol car with a 2.0L engine - Filling the car's 50 litre tank",
            "Petrol motorcycle with a 650cc engine - Filling the motorcycle's 15 litre tank",
        ]


class TestFactoryMethod:
    @pytest.mark.parametrize("name,expected", [
        ("car", Car),
        ("Truck", Truck),
        (" motorcycle ", Motorcycle),
    ])
    def test_create_vehicle(self, name, expected):
        assert isinstance(VehicleFactory.create_vehicle(name), expected)

    def test_invalid_vehicle_type(self):
        with pytest.raises(InvalidVehicleTypeError, match="Invalid vehicle type"):
            VehicleFactory.create_vehicle("boat")

    def test_register_vehicle_type(self, monkeypatch):
        monkeypatch.setattr(VehicleFactory, "_vehicle_types", dict(VehicleFactory._vehicle_types))

        class Bus(Vehicle):
            wheels = 6

            def deliver(self) -> str:
                return "Bus driven to the depot"

        VehicleFactory.register_vehicle_type("Bus", Bus)

        assert "bus" in VehicleFactory.supported_types()
        assert VehicleFactory.create_vehicle("bus").wheels == 6

    def test_register_rejects_non_vehicle(self):
        with pytest.raises(ValidationError):
            VehicleFactory.register_vehicle_type("rock", str)

    def test_dealerships_use_factory_method(self):
        assert CarDealership().sell_vehicle("Alice") == (
            "CarDealership sold a car (4 wheels) to Alice: Car delivered on a flatbed trailer"
        )
        assert "truck (18 wheels)" in TruckDealership().sell_vehicle("Bob")

    def test_demo_reports_invalid_type(self):
        assert "create_vehicle('spaceship') -> Invalid vehicle type: spaceship" in factory_method.demo()
