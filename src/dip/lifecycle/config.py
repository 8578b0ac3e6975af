"""
Configuration for the demonstration sequences.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .providers import PROVIDER_KINDS, Capability
from .strategy import StrategyKind


class Layout(Enum):
    """Which slot shape the demonstrated consumers have."""

    SERVICES = "services"
    CAPABILITY = "capability"


@dataclass(frozen=True)
class DemoConfig:
    """
    Everything the driver needs to decide how consumers get built.

    The variant labels and the strategy are chosen here, by the driver; the
    consumers themselves never look at either.

    omit names roles whose providers are withheld from the consumer. Under
    eager composition the consumer builds every provider itself, so the driver
    only notes the omission.
    """

    strategy: StrategyKind
    layout: Layout = Layout.SERVICES
    variants: tuple[str, ...] = ("A", "B", "C")
    kinds: tuple[type[Capability], ...] = tuple(PROVIDER_KINDS.values())
    share_providers: bool = True
    omit: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError("At least one consumer variant is required")
        if len(set(self.variants)) != len(self.variants):
            raise ValueError(f"Duplicate consumer variants: {self.variants}")
        if not self.kinds:
            raise ValueError("At least one provider kind is required")

    @classmethod
    def from_name(cls, name: str, **overrides: object) -> DemoConfig:
        """
        Build a config from a strategy name such as 'lazy-aggregation'.

        Raises:
            ValueError: If the name is not a known strategy
        """
        return cls(StrategyKind.parse(name), **overrides)  # type: ignore[arg-type]

    def with_layout(self, layout: Layout) -> DemoConfig:
        return replace(self, layout=layout)

    def __str__(self) -> str:
        return f"{self.strategy.value} ({self.layout.value})"
