import pytest

from vehicle_patterns.behavioral.chain_of_responsibility import (
    BrakeHandler,
    EngineHandler,
    OilChangeHandler,
    ServiceDesk,
    ServiceRequest,
    TireHandler,
    default_service_desk,
)
from vehicle_patterns.domain.exceptions import UnhandledRequestError, ValidationError


@pytest.fixture
def desk():
    return default_service_desk()


@pytest.mark.parametrize("kind,station", [
    ("oil", "Quick lube bay"),
    ("Puncture", "Tire shop"),
    ("brake pads", "Brake specialist"),
    ("timing belt", "Master mechanic"),
])
def test_request_reaches_matching_handler(desk, kind, station):
    assert desk.submit(ServiceRequest(kind=kind)).startswith(station)


def test_message_includes_description(desk):
    result = desk.submit(ServiceRequest(kind="tires", description="winter set"))

    assert result == "Tire shop took care of tires (winter set)"


def test_unhandled_request_raises(desk):
    with pytest.raises(UnhandledRequestError) as exc_info:
        desk.submit(ServiceRequest(kind="paint", description="scratch"))

    assert str(exc_info.value) == "No handler available for request: paint (scratch)"
    assert exc_info.value.request.kind == "paint"


def test_chain_order_is_respected():
    desk = ServiceDesk([TireHandler()])
    with pytest.raises(UnhandledRequestError):
        desk.submit(ServiceRequest(kind="engine"))

    desk.add_handler(EngineHandler())
    assert desk.submit(ServiceRequest(kind="engine")).startswith("Master mechanic")


def test_set_next_returns_next_handler():
    oil = OilChangeHandler()
    brakes = BrakeHandler()

    assert oil.set_next(brakes) is brakes
    assert oil.handle(ServiceRequest(kind="brakes")).startswith("Brake specialist")


def test_empty_desk_rejects_requests():
    with pytest.raises(ValidationError):
        ServiceDesk().submit(ServiceRequest(kind="oil"))
