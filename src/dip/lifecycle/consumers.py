"""
Consumers that depend on the service providers.

ServiceConsumer holds one concretely typed slot per service. CapabilityConsumer
holds a single slot typed as the Capability abstraction, so any provider kind
can be substituted into it. Neither decides its own binding strategy; the
caller picks one when constructing it. Both keep their slots in an embedded
SlotBundle and delegate to the functions in wiring.
"""

from __future__ import annotations

from typing import Any, cast

from . import wiring
from .providers import Capability, Service01, Service02, Service03
from .roles import CAPABILITY, SERVICE01, SERVICE02, SERVICE03, SERVICE_ROLES, Role
from .slots import SlotBundle
from .strategy import (
    BindingStrategy,
    EagerAggregation,
    EagerComposition,
    Factories,
    LazyAggregation,
    LazyComposition,
)


class ServiceConsumer:
    """A consumer with one slot for each of Service01, Service02 and Service03."""

    def __init__(
        self,
        variant: str,
        strategy: BindingStrategy,
        *,
        service01: Service01 | None = None,
        service02: Service02 | None = None,
        service03: Service03 | None = None,
    ):
        self._variant = variant
        self._strategy = strategy
        self._slots = wiring.assemble(
            variant,
            strategy,
            SERVICE_ROLES,
            {"service01": service01, "service02": service02, "service03": service03},
        )

    @classmethod
    def composed(cls, variant: str, factories: Factories | None = None) -> ServiceConsumer:
        """Eager composition: build and own all three services now."""
        return cls(variant, EagerComposition(factories))

    @classmethod
    def aggregated(
        cls,
        variant: str,
        service01: Service01 | None,
        service02: Service02 | None,
        service03: Service03 | None,
    ) -> ServiceConsumer:
        """Eager aggregation: take three ready services, all of them required."""
        return cls(
            variant,
            EagerAggregation(),
            service01=service01,
            service02=service02,
            service03=service03,
        )

    @classmethod
    def deferred(cls, variant: str) -> ServiceConsumer:
        """Lazy aggregation: start empty, receive services via bind_* later."""
        return cls(variant, LazyAggregation())

    @classmethod
    def on_demand(cls, variant: str, factories: Factories | None = None) -> ServiceConsumer:
        """Lazy composition: start empty, build each service on initialize_*."""
        return cls(variant, LazyComposition(factories))

    @property
    def variant(self) -> str:
        return self._variant

    @property
    def strategy(self) -> BindingStrategy:
        return self._strategy

    @property
    def slots(self) -> SlotBundle:
        return self._slots

    @property
    def service01(self) -> Service01:
        return cast(Service01, wiring.resolve(self, SERVICE01))

    @property
    def service02(self) -> Service02:
        return cast(Service02, wiring.resolve(self, SERVICE02))

    @property
    def service03(self) -> Service03:
        return cast(Service03, wiring.resolve(self, SERVICE03))

    def bind_service01(self, provider: Service01) -> None:
        wiring.bind(self, SERVICE01, provider)

    def bind_service02(self, provider: Service02) -> None:
        wiring.bind(self, SERVICE02, provider)

    def bind_service03(self, provider: Service03) -> None:
        wiring.bind(self, SERVICE03, provider)

    def initialize_service01(self) -> Service01:
        return cast(Service01, wiring.initialize(self, SERVICE01))

    def initialize_service02(self) -> Service02:
        return cast(Service02, wiring.initialize(self, SERVICE02))

    def initialize_service03(self) -> Service03:
        return cast(Service03, wiring.initialize(self, SERVICE03))

    def invoke(self, role: Role | str, operation: str | None = None) -> Any:
        return wiring.invoke(self, role, operation)

    def __repr__(self) -> str:
        return f"ServiceConsumer({self._variant!r}, {self._strategy!r})"


class CapabilityConsumer:
    """A consumer with a single slot that accepts any Capability."""

    def __init__(
        self,
        variant: str,
        strategy: BindingStrategy,
        *,
        capability: Capability | None = None,
    ):
        self._variant = variant
        self._strategy = strategy
        self._slots = wiring.assemble(variant, strategy, (CAPABILITY,), {"capability": capability})

    @classmethod
    def composed(cls, variant: str, kind: type[Capability]) -> CapabilityConsumer:
        """Eager composition: build and own a provider of the given kind now."""
        return cls(variant, EagerComposition({CAPABILITY.name: kind}))

    @classmethod
    def aggregated(cls, variant: str, capability: Capability | None) -> CapabilityConsumer:
        """Eager aggregation: take a ready provider of any kind."""
        return cls(variant, EagerAggregation(), capability=capability)

    @classmethod
    def deferred(cls, variant: str) -> CapabilityConsumer:
        """Lazy aggregation: start empty, receive a provider via bind_capability."""
        return cls(variant, LazyAggregation())

    @classmethod
    def on_demand(cls, variant: str, kind: type[Capability]) -> CapabilityConsumer:
        """Lazy composition: start empty, build a provider of the given kind on initialize."""
        return cls(variant, LazyComposition({CAPABILITY.name: kind}))

    @property
    def variant(self) -> str:
        return self._variant

    @property
    def strategy(self) -> BindingStrategy:
        return self._strategy

    @property
    def slots(self) -> SlotBundle:
        return self._slots

    @property
    def capability(self) -> Capability:
        return cast(Capability, wiring.resolve(self, CAPABILITY))

    def bind_capability(self, provider: Capability) -> None:
        wiring.bind(self, CAPABILITY, provider)

    def initialize_capability(self) -> Capability:
        return cast(Capability, wiring.initialize(self, CAPABILITY))

    def invoke(self, operation: str | None = None) -> Any:
        return wiring.invoke(self, CAPABILITY, operation)

    def __repr__(self) -> str:
        return f"CapabilityConsumer({self._variant!r}, {self._strategy!r})"
