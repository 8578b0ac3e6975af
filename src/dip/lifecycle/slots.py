"""
Slot storage shared by every consumer.

A slot is either Bound to a provider or in the Unbound state. Unbound is a
real value that can be inspected, so reading an empty slot raises
UnboundSlotAccess instead of handing back None.

Slots are not synchronized. Code that binds and reads the same slot from
several threads has to guard the bundle itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import IncompatibleProvider, UnboundSlotAccess, UnknownRole
from .roles import Role

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Bound(Generic[T]):
    """State of a slot holding a provider."""

    value: T

    def __repr__(self) -> str:
        return f"Bound({self.value!r})"


class Unbound:
    """
    State of a slot nothing was bound to yet.

    This is a singleton; use Unbound.instance() or the UNBOUND constant.
    """

    _instance: Unbound | None = None

    def __init__(self) -> None:
        """Private constructor - use instance() instead."""
        if Unbound._instance is not None:
            raise RuntimeError("Unbound is a singleton - use instance() method")

    @classmethod
    def instance(cls) -> Unbound:
        """Get the singleton unbound state."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __repr__(self) -> str:
        return "UNBOUND"


UNBOUND = Unbound.instance()

SlotState = Bound[Any] | Unbound


class ServiceSlot:
    """A named reference cell that holds at most one provider for a role."""

    def __init__(self, role: Role, owner: str):
        self._role = role
        self._owner = owner
        self._state: SlotState = UNBOUND

    @property
    def role(self) -> Role:
        return self._role

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def state(self) -> SlotState:
        return self._state

    @property
    def is_bound(self) -> bool:
        return isinstance(self._state, Bound)

    def bind(self, provider: Any) -> None:
        """
        Bind a provider to this slot, replacing whatever was bound before.

        Raises:
            IncompatibleProvider: If the provider does not satisfy the role's type
        """
        if provider is None or not self._role.accepts(provider):
            raise IncompatibleProvider(self._owner, self._role.name, self._role.bound_type, provider)

        if self.is_bound:
            logger.debug("Rebinding %s.%s to %r", self._owner, self._role, provider)
        else:
            logger.debug("Binding %s.%s to %r", self._owner, self._role, provider)
        self._state = Bound(provider)

    def get(self) -> Any:
        """
        Get the bound provider.

        Raises:
            UnboundSlotAccess: If nothing has been bound yet
        """
        match self._state:
            case Bound(value=value):
                return value
            case _:
                raise UnboundSlotAccess(self._owner, self._role.name)

    def find(self) -> Any | None:
        """Get the bound provider, or None if nothing has been bound yet."""
        match self._state:
            case Bound(value=value):
                return value
            case _:
                return None

    def __repr__(self) -> str:
        return f"ServiceSlot({self._owner}.{self._role}={self._state!r})"


class SlotBundle:
    """
    The set of slots one consumer holds, keyed by role.

    Consumers embed a bundle rather than inheriting storage, so any consumer
    shape can reuse the same bind and read operations.
    """

    def __init__(self, roles: Iterable[Role], owner: str):
        self._owner = owner
        self._slots: dict[str, ServiceSlot] = {}
        for role in roles:
            if role.name in self._slots:
                raise ValueError(f"Duplicate slot {role} for consumer {owner}")
            self._slots[role.name] = ServiceSlot(role, owner)

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def roles(self) -> tuple[Role, ...]:
        return tuple(slot.role for slot in self._slots.values())

    def role(self, role: Role | str) -> Role:
        """Normalize a role or role name to the Role this bundle holds."""
        return self.slot(role).role

    def slot(self, role: Role | str) -> ServiceSlot:
        """
        Get the slot for a role.

        Args:
            role: A Role, its name, or its attribute form ("service01")

        Raises:
            UnknownRole: If this bundle has no slot for the role
        """
        name = role.name if isinstance(role, Role) else role
        slot = self._slots.get(name)
        if slot is None:
            slot = next((s for s in self._slots.values() if s.role.attr == name), None)
        if slot is None or (isinstance(role, Role) and slot.role != role):
            raise UnknownRole(self._owner, str(role))
        return slot

    def bind(self, role: Role | str, provider: Any) -> None:
        self.slot(role).bind(provider)

    def get(self, role: Role | str) -> Any:
        return self.slot(role).get()

    def find(self, role: Role | str) -> Any | None:
        return self.slot(role).find()

    def is_bound(self, role: Role | str) -> bool:
        return self.slot(role).is_bound

    def is_complete(self) -> bool:
        """Check if every slot holds a provider."""
        return all(slot.is_bound for slot in self._slots.values())

    def bound_count(self) -> int:
        return sum(1 for slot in self._slots.values() if slot.is_bound)

    def unbound_roles(self) -> tuple[Role, ...]:
        return tuple(slot.role for slot in self._slots.values() if not slot.is_bound)

    def __iter__(self) -> Iterator[ServiceSlot]:
        return iter(self._slots.values())

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        slots = ", ".join(f"{slot.role}={slot.state!r}" for slot in self._slots.values())
        return f"SlotBundle({self._owner}: {slots})"
