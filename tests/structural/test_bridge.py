from vehicle_patterns.structural.bridge import (
    Car,
    DieselEngine,
    ElectricEngine,
    Motorcycle,
    PetrolEngine,
    Truck,
)


def test_car_reports_engine_power():
    assert Car(PetrolEngine()).drive() == "Car: petrol engine roars to life, cruising at 110 kW"


def test_truck_halves_usable_power():
    assert "hauling with 125 kW to spare" in Truck(DieselEngine()).drive()


def test_any_engine_fits_any_vehicle():
    for engine in (PetrolEngine(), DieselEngine(), ElectricEngine()):
        assert Motorcycle(engine).drive().startswith("Motorcycle: ")


def test_swap_engine_at_runtime():
    car = Car(PetrolEngine())
    car.swap_engine(ElectricEngine())

    assert car.drive() == "Car: electric motor hums silently, cruising at 150 kW"
