import pytest

from vehicle_patterns.creational.prototype import Bus, Car, PrototypeRegistry
from vehicle_patterns.domain.exceptions import ResourceNotFoundError, ValidationError


@pytest.fixture
def registry():
    registry = PrototypeRegistry()
    registry.register("taxi", Car(make="Toyota", model="Prius", color="yellow", options=["meter"]))
    registry.register("bus", Bus(make="Volvo", model="7900", capacity=70))
    return registry


def test_clone_applies_overrides(registry):
    taxi = registry.create("taxi", plate="TX-1")

    assert isinstance(taxi, Car)
    assert taxi.plate == "TX-1"
    assert taxi.make == "Toyota"


def test_clones_do_not_share_mutable_state(registry):
    first = registry.create("taxi")
    second = registry.create("taxi")
    first.options.append("child seat")

    assert second.options == ["meter"]
    assert registry.create("taxi").options == ["meter"]


def test_clone_keeps_subclass_fields(registry):
    bus = registry.create("bus", route="Line 7")

    assert bus.capacity == 70
    assert "route Line 7" in bus.describe()


def test_clone_rejects_unknown_field(registry):
    with pytest.raises(ValidationError, match="Unknown fields"):
        registry.create("taxi", wings=2)


def test_clone_rejects_invalid_value(registry):
    with pytest.raises(ValidationError):
        registry.create("taxi", doors="many")


def test_unknown_prototype(registry):
    with pytest.raises(ResourceNotFoundError):
        registry.create("limousine")


def test_unregister(registry):
    registry.unregister("bus")

    assert registry.names() == ["taxi"]
    with pytest.raises(ResourceNotFoundError):
        registry.unregister("bus")


def test_invalid_override_does_not_warn(registry, recwarn):
    with pytest.raises(ValidationError):
        registry.create("taxi", doors="many")

    assert len(recwarn) == 0


def test_override_list_is_copied(registry):
    options = ["meter"]
    taxi = registry.create("taxi", options=options)
    options.append("roof sign")

    assert taxi.options == ["meter"]
