"""Vehicle Patterns - Root Package.

A collection of small, independent example programs, each illustrating one
classic object-oriented design pattern through a running "vehicle" theme.

Key Components:
    - creational: Builder, Abstract Factory, Factory Method, Prototype, Singleton
    - structural: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy
    - behavioral: Chain of Responsibility, Command, Interpreter, Iterator,
      Mediator, Memento, Observer, State, Strategy, Template Method, Visitor

Shared support code (logging, exceptions, configuration and the example entry
helper) lives in helpers, domain, config and cli. The examples themselves do
not depend on each other.

Usage:
    Every example runs on its own:

    >>> python -m vehicle_patterns.creational.builder
    >>> python -m vehicle_patterns.behavioral.state --format table
"""

__version__ = "1.0.0"
__package_name__ = "vehicle-patterns"
