"""Chain of Responsibility pattern - route a service request through the garage.

Intent:
    Avoid coupling the sender of a request to its receiver by giving more
    than one object a chance to handle the request. Chain the receiving
    objects and pass the request along the chain until an object handles it.

Each ``ServiceHandler`` either accepts a ``ServiceRequest`` or passes it to
the next handler. ``ServiceDesk`` owns the handler list, links it into a
chain, and raises ``UnhandledRequestError`` when the request falls off the
end.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import UnhandledRequestError, ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)


class ServiceRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    description: str = ""

    def __str__(self) -> str:
        return f"{self.kind} ({self.description})" if self.description else self.kind


class ServiceHandler(ABC):
    """Handler base. Subclasses implement can_handle() and process()."""

    def __init__(self):
        self._next: Optional["ServiceHandler"] = None

    def set_next(self, handler: "ServiceHandler") -> "ServiceHandler":
        """Link the next handler and return it, so links can be chained."""
        self._next = handler
        return handler

    def handle(self, request: ServiceRequest) -> str:
        if self.can_handle(request):
            logger.debug("Request handled", handler=type(self).__name__, request=str(request))
            return self.process(request)
        if self._next is None:
            raise UnhandledRequestError(request)
        logger.debug("Passing request on", handler=type(self).__name__, request=str(request))
        return self._next.handle(request)

    @abstractmethod
    def can_handle(self, request: ServiceRequest) -> bool:
        pass

    @abstractmethod
    def process(self, request: ServiceRequest) -> str:
        pass


class _KindHandler(ServiceHandler):
    kinds: tuple = ()
    station = ""

    def can_handle(self, request: ServiceRequest) -> bool:
        return request.kind.lower() in self.kinds

    def process(self, request: ServiceRequest) -> str:
        return f"{self.station} took care of {request}"


class OilChangeHandler(_KindHandler):
    kinds = ("oil", "oil change", "filter")
    station = "Quick lube bay"


class TireHandler(_KindHandler):
    kinds = ("tire", "tires", "puncture", "alignment")
    station = "Tire shop"


class BrakeHandler(_KindHandler):
    kinds = ("brakes", "brake pads")
    station = "Brake specialist"


class EngineHandler(_KindHandler):
    kinds = ("engine", "check engine light", "timing belt")
    station = "Master mechanic"


class ServiceDesk:
    """Owns the handler list and links it into a chain."""

    def __init__(self, handlers: Optional[List[ServiceHandler]] = None):
        self._handlers: List[ServiceHandler] = []
        for handler in handlers or []:
            self.add_handler(handler)

    def add_handler(self, handler: ServiceHandler) -> None:
        if self._handlers:
            self._handlers[-1].set_next(handler)
        self._handlers.append(handler)

    def submit(self, request: ServiceRequest) -> str:
        if not self._handlers:
            raise ValidationError("Service desk has no handlers")
        return self._handlers[0].handle(request)


def default_service_desk() -> ServiceDesk:
    return ServiceDesk([OilChangeHandler(), TireHandler(), BrakeHandler(), EngineHandler()])


def demo() -> List[str]:
    desk = default_service_desk()
    requests = [
        ServiceRequest(kind="oil", description="5,000 km service"),
        ServiceRequest(kind="puncture", description="rear left"),
        ServiceRequest(kind="check engine light"),
        ServiceRequest(kind="paint", description="scratch on door"),
    ]
    lines = []
    for request in requests:
        try:
            lines.append(desk.submit(request))
        except UnhandledRequestError as e:
            lines.append(str(e))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Chain of Responsibility pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
