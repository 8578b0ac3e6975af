"""
Bind and invoke operations that work on any consumer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol

from .errors import UnsupportedOperation
from .providers import OPERATIONS
from .roles import Role
from .slots import SlotBundle
from .strategy import BindingStrategy

logger = logging.getLogger(__name__)


class Consumer(Protocol):
    """Anything that holds its dependencies in a slot bundle."""

    @property
    def variant(self) -> str: ...

    @property
    def strategy(self) -> BindingStrategy: ...

    @property
    def slots(self) -> SlotBundle: ...


def assemble(
    variant: str,
    strategy: BindingStrategy,
    roles: Iterable[Role],
    provided: Mapping[str, Any],
) -> SlotBundle:
    """
    Create the slot bundle for a new consumer and let the strategy populate it.

    Args:
        variant: Label of the consumer, used in diagnostics
        strategy: Binding strategy chosen by the caller
        roles: The slots the consumer holds
        provided: Providers passed to the consumer's constructor, keyed by role

    Returns:
        The populated bundle

    Raises:
        MissingRequiredDependency: If eager aggregation lacks a provider
        OwnershipViolation: If a composing strategy was handed a provider
    """
    slots = SlotBundle(roles, variant)
    strategy.populate(slots, provided)
    logger.debug(
        "Assembled %s with %r (%d/%d slots bound)",
        variant,
        strategy,
        slots.bound_count(),
        len(slots),
    )
    return slots


def bind(consumer: Consumer, role: Role | str, provider: Any) -> None:
    """
    Bind a provider into one of the consumer's slots, replacing any earlier one.

    Raises:
        UnknownRole: If the consumer has no such slot
        OwnershipViolation: If the consumer owns its providers
        IncompatibleProvider: If the provider has the wrong type for the slot
    """
    slot = consumer.slots.slot(role)
    consumer.strategy.check_external_bind(consumer.slots, slot.role)
    slot.bind(provider)


def initialize(consumer: Consumer, role: Role | str) -> Any:
    """
    Have the consumer build and bind its own provider for one slot.

    Returns:
        The newly created provider
    """
    slots = consumer.slots
    return consumer.strategy.initialize(slots, slots.role(role))


def resolve(consumer: Consumer, role: Role | str) -> Any:
    """
    Get the provider bound to a slot.

    Raises:
        UnboundSlotAccess: If the slot was never bound
    """
    return consumer.slots.get(role)


def invoke(consumer: Consumer, role: Role | str, operation: str | None = None) -> Any:
    """
    Run an operation on the provider bound to a slot.

    Args:
        consumer: The consumer holding the slot
        role: Which slot to use
        operation: Operation name ("operation2"); defaults to the provider's own

    Returns:
        Whatever the provider returned

    Raises:
        UnboundSlotAccess: If the slot was never bound
        UnsupportedOperation: If the operation is not one of operation1..3

    Errors raised by the provider itself are propagated unchanged.
    """
    provider = resolve(consumer, role)
    if operation is None:
        return provider.invoke()
    if operation not in OPERATIONS:
        raise UnsupportedOperation(getattr(provider, "kind", type(provider).__name__), operation)
    call: Callable[[], Any] = getattr(provider, operation)
    return call()
