"""Structural pattern examples: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy."""
