# src/vehicle_patterns/domain/exceptions.py
from typing import Any, Iterable, List, Optional


class PatternError(Exception):
    """Base exception for all errors raised by the pattern examples."""
    pass


class ValidationError(PatternError):
    """Raised when an example receives invalid input."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class InvalidVehicleTypeError(ValidationError):
    """Raised when a factory is asked for a vehicle type it cannot build."""
    def __init__(self, vehicle_type: str, supported: Optional[Iterable[str]] = None):
        self.vehicle_type = vehicle_type
        self.supported = sorted(supported) if supported else []
        super().__init__(f"Invalid vehicle type: {vehicle_type}", {"supported": self.supported})


class ResourceNotFoundError(PatternError):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidStateTransitionError(PatternError):
    """Raised when attempting an action the current state does not allow."""
    def __init__(self, current_state: str, attempted_action: str):
        super().__init__(
            f"Cannot {attempted_action} while {current_state}"
        )
        self.current_state = current_state
        self.attempted_action = attempted_action


class UnhandledRequestError(PatternError):
    """Raised when no handler in a chain accepts a request."""
    def __init__(self, request: Any):
        super().__init__(f"No handler available for request: {request}")
        self.request = request


class ConfigurationError(PatternError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
