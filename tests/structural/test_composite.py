import pytest

from vehicle_patterns.domain.exceptions import ResourceNotFoundError, ValidationError
from vehicle_patterns.structural.composite import Assembly, Part, build_car


class TestComposite:
    def setup_method(self):
        self.car = build_car()

    def test_totals_roll_up_through_the_tree(self):
        assert self.car.price() == pytest.approx(7680.0)
        assert self.car.weight() == pytest.approx(474.0)

    def test_leaf_and_composite_share_interface(self):
        wheel = Assembly("wheel", [Part("tire", 100.0, 8.0), Part("rim", 150.0, 9.0)])
        parts = [Part("mirror", 50.0, 1.5), wheel]

        assert sum(part.price() for part in parts) == pytest.approx(300.0)

    def test_walk_visits_every_node(self):
        names = [part.name for part in self.car.walk()]

        assert names.count("tire") == 4
        assert "turbocharger" in names

    def test_describe_indents_children(self):
        lines = self.car.describe()

        assert lines[0] == "+ car: $7,680.00, 474 kg"
        assert lines[1] == "  - chassis: $3,000.00, 300 kg"

    def test_remove_part(self):
        chassis = self.car.children()[0]
        self.car.remove(chassis)

        assert self.car.price() == pytest.approx(4680.0)

    def test_cycle_is_rejected(self):
        inner = Assembly("inner")
        outer = Assembly("outer", [inner])

        with pytest.raises(ValidationError, match="cycle"):
            inner.add(outer)
        with pytest.raises(ValidationError):
            outer.add(outer)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Part("bolt", -1.0, 0.1)

    def test_remove_unknown_part(self):
        with pytest.raises(ResourceNotFoundError):
            self.car.remove(Part("spoiler", 400.0, 6.0))
