"""Shared domain-level exceptions used by the pattern examples."""

from vehicle_patterns.domain.exceptions import (
    ConfigurationError,
    InvalidStateTransitionError,
    InvalidVehicleTypeError,
    PatternError,
    ResourceNotFoundError,
    UnhandledRequestError,
    ValidationError,
)

__all__ = [
    "PatternError",
    "ValidationError",
    "InvalidVehicleTypeError",
    "ResourceNotFoundError",
    "InvalidStateTransitionError",
    "UnhandledRequestError",
    "ConfigurationError",
]
