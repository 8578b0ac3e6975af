"""
Error types raised while constructing consumers and using their slots.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class LifecycleError(Exception):
    """Base class for all binding and slot errors."""


class UnboundSlotAccess(LifecycleError):
    """Raised when a slot is read or invoked before anything was bound to it."""

    def __init__(self, consumer: str, role: str):
        self.consumer = consumer
        self.role = role
        super().__init__(f"Slot {role} of consumer {consumer} is not bound")


class MissingRequiredDependency(LifecycleError):
    """Raised when eager aggregation is constructed without every provider."""

    def __init__(self, consumer: str, roles: Iterable[str]):
        self.consumer = consumer
        self.roles = tuple(roles)
        super().__init__(
            f"Consumer {consumer} requires providers for: {', '.join(self.roles)}"
        )

    @property
    def role(self) -> str:
        """First missing role, for reports that name a single slot."""
        return self.roles[0]


class IncompatibleProvider(LifecycleError, TypeError):
    """Raised when a provider does not satisfy the type a slot is bound to."""

    def __init__(self, consumer: str, role: str, expected: type, provider: Any):
        self.consumer = consumer
        self.role = role
        self.expected = expected
        self.provider = provider
        super().__init__(
            f"Slot {role} of consumer {consumer} expects {expected.__name__}, "
            f"got {type(provider).__name__}"
        )


class UnexpectedProvider(LifecycleError, TypeError):
    """Raised when a provider is passed to a constructor that binds lazily."""

    def __init__(self, consumer: str, role: str):
        self.consumer = consumer
        self.role = role
        super().__init__(
            f"Consumer {consumer} binds {role} lazily and takes no provider at construction"
        )


class UnknownRole(LifecycleError, KeyError):
    """Raised when a consumer has no slot for the requested role."""

    def __init__(self, consumer: str, role: str):
        self.consumer = consumer
        self.role = role
        super().__init__(f"Consumer {consumer} has no slot {role}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class OwnershipViolation(LifecycleError):
    """Raised when a provider is bound into a consumer that owns its providers."""

    def __init__(self, consumer: str, role: str):
        self.consumer = consumer
        self.role = role
        super().__init__(
            f"Consumer {consumer} owns its {role} provider and does not accept external bindings"
        )


class MissingProviderFactory(LifecycleError):
    """Raised when a consumer must create a provider but has no way to build it."""

    def __init__(self, consumer: str, role: str):
        self.consumer = consumer
        self.role = role
        super().__init__(f"Consumer {consumer} has no factory for slot {role}")


class ProviderOperationFailure(LifecycleError):
    """
    Raised by a provider when one of its operations fails.

    The binding core never raises, wraps, or retries this error; it reaches the
    caller exactly as the provider raised it.
    """

    def __init__(self, provider: str, operation: str, reason: str | None = None):
        self.provider = provider
        self.operation = operation
        msg = f"{provider}.{operation} failed"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnsupportedOperation(ProviderOperationFailure):
    """Raised when a capability is asked for an operation its kind does not implement."""

    def __init__(self, provider: str, operation: str):
        super().__init__(provider, operation, "operation not supported by this provider")
