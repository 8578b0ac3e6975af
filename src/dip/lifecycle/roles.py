"""
Role implementation identifying the slots a consumer holds.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .providers import Capability, Service01, Service02, Service03


@dataclass(frozen=True)
class Role:
    """A named slot identity together with the type its providers must satisfy."""

    name: str
    bound_type: type
    factory: Callable[[], Any] | None = field(default=None, compare=False)

    @classmethod
    def of(cls, provider_type: type, name: str | None = None) -> Role:
        """Create a role bound to a concrete provider type, built by its constructor."""
        return cls(name or provider_type.__name__, provider_type, provider_type)

    @property
    def attr(self) -> str:
        """Snake-case form of the name, used for keyword arguments and method names."""
        return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", self.name).lower()

    def accepts(self, provider: Any) -> bool:
        return isinstance(provider, self.bound_type)

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash((self.name, self.bound_type))


SERVICE01 = Role.of(Service01)
SERVICE02 = Role.of(Service02)
SERVICE03 = Role.of(Service03)
CAPABILITY = Role("Capability", Capability)

SERVICE_ROLES: tuple[Role, ...] = (SERVICE01, SERVICE02, SERVICE03)
