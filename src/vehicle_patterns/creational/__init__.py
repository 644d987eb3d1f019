"""Creational pattern examples: Builder, Abstract Factory, Factory Method, Prototype, Singleton."""
