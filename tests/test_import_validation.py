"""Import validation tests for every example module.

Each example must be importable on its own and expose the same entry points,
so ``python -m vehicle_patterns.<category>.<name>`` works for all of them.
"""

import importlib

import pytest

EXAMPLE_MODULES = [
    "vehicle_patterns.creational.abstract_factory",
    "vehicle_patterns.creational.builder",
    "vehicle_patterns.creational.factory_method",
    "vehicle_patterns.creational.prototype",
    "vehicle_patterns.creational.singleton",
    "vehicle_patterns.structural.adapter",
    "vehicle_patterns.structural.bridge",
    "vehicle_patterns.structural.composite",
    "vehicle_patterns.structural.decorator",
    "vehicle_patterns.structural.facade",
    "vehicle_patterns.structural.flyweight",
    "vehicle_patterns.structural.proxy",
    "vehicle_patterns.behavioral.chain_of_responsibility",
    "vehicle_patterns.behavioral.command",
    "vehicle_patterns.behavioral.interpreter",
    "vehicle_patterns.behavioral.iterator",
    "vehicle_patterns.behavioral.mediator",
    "vehicle_patterns.behavioral.memento",
    "vehicle_patterns.behavioral.observer",
    "vehicle_patterns.behavioral.state",
    "vehicle_patterns.behavioral.strategy",
    "vehicle_patterns.behavioral.template_method",
    "vehicle_patterns.behavioral.visitor",
]


class TestExampleModules:
    """Every example exposes demo() and main() and runs cleanly."""

    def test_all_patterns_covered(self):
        assert len(EXAMPLE_MODULES) == 23

    @pytest.mark.parametrize("module_name", EXAMPLE_MODULES)
    def test_module_has_entry_points(self, module_name):
        module = importlib.import_module(module_name)
        assert callable(module.demo)
        assert callable(module.main)
        assert module.__doc__ and "pattern" in module.__doc__.lower()

    @pytest.mark.parametrize("module_name", EXAMPLE_MODULES)
    def test_demo_returns_lines(self, module_name):
        module = importlib.import_module(module_name)
        lines = module.demo()
        assert lines
        assert all(isinstance(line, str) for line in lines)

    @pytest.mark.parametrize("module_name", EXAMPLE_MODULES)
    def test_main_exits_cleanly(self, module_name, capsys):
        module = importlib.import_module(module_name)
        assert module.main([]) == 0
        assert capsys.readouterr().out.strip()
