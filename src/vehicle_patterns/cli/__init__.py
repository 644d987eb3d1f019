"""Command line support for the example programs."""
