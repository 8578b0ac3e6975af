"""
Service providers and the capability abstraction they share.

Each provider implements exactly one operation. Providers keep no state other
than the writer they report through, so a single instance can be shared by any
number of consumers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from .errors import UnsupportedOperation

Writer = Callable[[str], object]

OPERATIONS = frozenset({"operation1", "operation2", "operation3"})


class Capability(ABC):
    """
    Uniform contract over every provider kind.

    Callers that hold a capability can either ask for a specific operation or
    call invoke() and let the provider dispatch to whatever it implements.
    """

    def __init__(self, writer: Writer | None = None):
        self._writer: Writer = writer if writer is not None else print

    @property
    def kind(self) -> str:
        """Name of the provider kind, e.g. 'Service01'."""
        return type(self).__name__

    @property
    @abstractmethod
    def native_operation(self) -> str:
        """Name of the operation this provider implements."""

    def operation1(self) -> str:
        raise UnsupportedOperation(self.kind, "operation1")

    def operation2(self) -> str:
        raise UnsupportedOperation(self.kind, "operation2")

    def operation3(self) -> str:
        raise UnsupportedOperation(self.kind, "operation3")

    def invoke(self) -> str:
        """Run this provider's own operation."""
        operation: Callable[[], str] = getattr(self, self.native_operation)
        return operation()

    def _emit(self, label: str) -> str:
        line = f"{self.kind}: {label} executed"
        self._writer(line)
        return line

    def __repr__(self) -> str:
        return f"{self.kind}()"


class Service01(Capability):
    @property
    def native_operation(self) -> str:
        return "operation1"

    def operation1(self) -> str:
        return self._emit("M1")


class Service02(Capability):
    @property
    def native_operation(self) -> str:
        return "operation2"

    def operation2(self) -> str:
        return self._emit("M2")


class Service03(Capability):
    @property
    def native_operation(self) -> str:
        return "operation3"

    def operation3(self) -> str:
        return self._emit("M3")


PROVIDER_KINDS: dict[str, type[Capability]] = {
    cls.__name__: cls for cls in (Service01, Service02, Service03)
}


def provider_kind(name: str) -> type[Capability]:
    """Look up a provider class by its kind name."""
    try:
        return PROVIDER_KINDS[name]
    except KeyError:
        known = ", ".join(PROVIDER_KINDS)
        raise ValueError(f"Unknown provider kind {name!r} (known: {known})") from None
