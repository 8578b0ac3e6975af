"""
Binding strategies: when a consumer's slots get populated, and by whom.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from .errors import (
    IncompatibleProvider,
    MissingProviderFactory,
    MissingRequiredDependency,
    OwnershipViolation,
    UnexpectedProvider,
    UnknownRole,
)
from .roles import Role
from .slots import SlotBundle

logger = logging.getLogger(__name__)

Factories = Mapping[str, Callable[[], Any]]


class StrategyKind(Enum):
    """Supported binding strategies."""

    EAGER_COMPOSITION = "eager-composition"
    EAGER_AGGREGATION = "eager-aggregation"
    LAZY_AGGREGATION = "lazy-aggregation"
    LAZY_COMPOSITION = "lazy-composition"

    @property
    def is_eager(self) -> bool:
        return self in (StrategyKind.EAGER_COMPOSITION, StrategyKind.EAGER_AGGREGATION)

    @property
    def is_composition(self) -> bool:
        return self in (StrategyKind.EAGER_COMPOSITION, StrategyKind.LAZY_COMPOSITION)

    @classmethod
    def parse(cls, name: str) -> StrategyKind:
        """Parse 'eager-composition', 'EAGER_COMPOSITION' and similar spellings."""
        normalized = name.strip().lower().replace("_", "-")
        for kind in cls:
            if kind.value == normalized:
                return kind
        known = ", ".join(kind.value for kind in cls)
        raise ValueError(f"Unknown binding strategy {name!r} (known: {known})")


class BindingStrategy(ABC):
    """
    Policy that decides how a consumer's slots are filled.

    populate() runs once, from the consumer's constructor, with whatever
    providers the caller handed in. It either fills every slot or leaves them
    empty; a failure aborts construction.
    """

    kind: StrategyKind

    @property
    def owns_providers(self) -> bool:
        """True when the consumer creates its providers and refuses external ones."""
        return self.kind.is_composition

    @abstractmethod
    def populate(self, bundle: SlotBundle, provided: Mapping[str, Any]) -> None:
        """Fill (or deliberately not fill) the bundle at construction time."""

    def check_external_bind(self, bundle: SlotBundle, role: Role) -> None:
        """Reject a post-construction bind this strategy does not permit."""
        if self.owns_providers:
            raise OwnershipViolation(bundle.owner, role.name)

    def initialize(self, bundle: SlotBundle, role: Role) -> Any:
        """Create and bind an owned provider for a single slot."""
        raise OwnershipViolation(bundle.owner, role.name)

    @staticmethod
    def _reject_unknown(bundle: SlotBundle, provided: Mapping[str, Any]) -> None:
        known = {name for role in bundle.roles for name in (role.name, role.attr)}
        for name in provided:
            if name not in known:
                raise UnknownRole(bundle.owner, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _Composing(BindingStrategy):
    """Shared factory lookup for the strategies that build their own providers."""

    def __init__(self, factories: Factories | None = None):
        self._factories: dict[str, Callable[[], Any]] = dict(factories or {})

    def _create(self, bundle: SlotBundle, role: Role) -> Any:
        factory = self._factories.get(role.name) or self._factories.get(role.attr) or role.factory
        if factory is None:
            raise MissingProviderFactory(bundle.owner, role.name)
        return factory()

    def _reject_provided(self, bundle: SlotBundle, provided: Mapping[str, Any]) -> None:
        self._reject_unknown(bundle, provided)
        for name, provider in provided.items():
            if provider is not None:
                raise OwnershipViolation(bundle.owner, bundle.role(name).name)

    def initialize(self, bundle: SlotBundle, role: Role) -> Any:
        provider = self._create(bundle, role)
        bundle.bind(role, provider)
        logger.debug("Initialized owned %s for %s", role, bundle.owner)
        return provider

    def __repr__(self) -> str:
        factories = ", ".join(sorted(self._factories))
        return f"{type(self).__name__}({factories})" if factories else super().__repr__()


class EagerComposition(_Composing):
    """The consumer builds every provider it needs inside its own constructor."""

    kind = StrategyKind.EAGER_COMPOSITION

    def populate(self, bundle: SlotBundle, provided: Mapping[str, Any]) -> None:
        self._reject_provided(bundle, provided)
        # Build everything before binding so a failing factory leaves nothing half-wired
        created = [(role, self._create(bundle, role)) for role in bundle.roles]
        for role, provider in created:
            bundle.bind(role, provider)


class LazyComposition(_Composing):
    """The consumer builds a provider only when asked to initialize that slot."""

    kind = StrategyKind.LAZY_COMPOSITION

    def populate(self, bundle: SlotBundle, provided: Mapping[str, Any]) -> None:
        self._reject_provided(bundle, provided)


class EagerAggregation(BindingStrategy):
    """The consumer receives a ready provider for every slot through its constructor."""

    kind = StrategyKind.EAGER_AGGREGATION

    def populate(self, bundle: SlotBundle, provided: Mapping[str, Any]) -> None:
        self._reject_unknown(bundle, provided)
        resolved: list[tuple[Role, Any]] = []
        missing: list[str] = []
        for role in bundle.roles:
            provider = provided.get(role.name, provided.get(role.attr))
            if provider is None:
                missing.append(role.name)
            elif not role.accepts(provider):
                raise IncompatibleProvider(bundle.owner, role.name, role.bound_type, provider)
            else:
                resolved.append((role, provider))

        if missing:
            raise MissingRequiredDependency(bundle.owner, missing)

        for role, provider in resolved:
            bundle.bind(role, provider)


class LazyAggregation(BindingStrategy):
    """The consumer starts empty and receives providers through bind calls."""

    kind = StrategyKind.LAZY_AGGREGATION

    def populate(self, bundle: SlotBundle, provided: Mapping[str, Any]) -> None:
        self._reject_unknown(bundle, provided)
        for name, provider in provided.items():
            if provider is not None:
                raise UnexpectedProvider(bundle.owner, bundle.role(name).name)


def strategy_for(kind: StrategyKind | str, factories: Factories | None = None) -> BindingStrategy:
    """
    Create the strategy instance for a strategy kind.

    Args:
        kind: The kind, or its name
        factories: Provider factories by role name, used by composition strategies

    Returns:
        A new BindingStrategy
    """
    if isinstance(kind, str):
        kind = StrategyKind.parse(kind)

    if kind is StrategyKind.EAGER_COMPOSITION:
        return EagerComposition(factories)
    if kind is StrategyKind.LAZY_COMPOSITION:
        return LazyComposition(factories)
    if factories:
        raise ValueError(f"{kind.value} does not create providers and takes no factories")
    if kind is StrategyKind.EAGER_AGGREGATION:
        return EagerAggregation()
    return LazyAggregation()
