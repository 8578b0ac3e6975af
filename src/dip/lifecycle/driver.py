"""
Demonstration driver: builds consumers under one strategy, wires them and
invokes every slot, reporting failures instead of stopping at the first one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any, TypeVar

from . import wiring
from .config import DemoConfig, Layout
from .consumers import CapabilityConsumer, ServiceConsumer
from .errors import LifecycleError
from .providers import Capability, Writer
from .roles import CAPABILITY, SERVICE_ROLES, Role
from .strategy import StrategyKind, strategy_for

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEPARATOR = "--------------"


@dataclass
class DemoReport:
    """Output and failures collected during one run."""

    title: str
    lines: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class DemoRunner:
    """Runs the fixed construct / bind / invoke script for one DemoConfig."""

    def __init__(self, config: DemoConfig, writer: Writer | None = None):
        self._config = config
        self._writer: Writer = writer if writer is not None else print
        self._report = DemoReport(str(config))

    @property
    def config(self) -> DemoConfig:
        return self._config

    def run(self) -> DemoReport:
        """Run the sequence once and return what happened."""
        self._report = DemoReport(str(self._config))
        self._write(f"| {self._config.strategy.value}:")
        if self._config.omit and self._config.strategy is StrategyKind.EAGER_COMPOSITION:
            # Consumers build their own providers here, so there is nothing to withhold
            omitted = ", ".join(sorted(self._config.omit))
            note = f"omit {omitted} has no effect under {self._config.strategy.value}"
            logger.info("%s", note)
            self._report.notes.append(note)
            self._write(f"~ {note}")

        shared = self._make_services() if self._config.share_providers else None
        for index, variant in enumerate(self._config.variants):
            if index:
                self._write(SEPARATOR)
            self._write(f"{variant}:")
            if self._config.layout is Layout.SERVICES:
                self._run_services(variant, shared)
            else:
                self._run_capability(variant)

        return self._report

    def _run_services(self, variant: str, shared: dict[str, Capability] | None) -> None:
        services = shared if shared is not None else self._make_services()
        consumer = self._attempt(
            variant, None, lambda: self._build_services(variant, services)
        )
        if consumer is None:
            return
        for role in SERVICE_ROLES:
            self._exercise(consumer, role, services.get(role.name))

    def _run_capability(self, variant: str) -> None:
        for kind in self._config.kinds:
            provider = kind(self._provider_writer)
            consumer = self._attempt(
                variant, CAPABILITY, partial(self._build_capability, variant, kind, provider)
            )
            if consumer is not None:
                self._exercise(consumer, CAPABILITY, provider)

    def _build_services(self, variant: str, services: dict[str, Capability]) -> ServiceConsumer:
        factories = self._factories(SERVICE_ROLES)
        strategy = strategy_for(self._config.strategy, factories if self._composing else None)
        if self._config.strategy is StrategyKind.EAGER_AGGREGATION:
            provided: dict[str, Any] = {
                role.attr: services.get(role.name) for role in SERVICE_ROLES
            }
            return ServiceConsumer(variant, strategy, **provided)
        return ServiceConsumer(variant, strategy)

    def _build_capability(
        self, variant: str, kind: type[Capability], provider: Capability
    ) -> CapabilityConsumer:
        if self._composing:
            factories = {CAPABILITY.name: partial(kind, self._provider_writer)}
            return CapabilityConsumer(variant, strategy_for(self._config.strategy, factories))
        if self._config.strategy is StrategyKind.EAGER_AGGREGATION:
            capability = None if CAPABILITY.name in self._config.omit else provider
            return CapabilityConsumer.aggregated(variant, capability)
        return CapabilityConsumer.deferred(variant)

    def _exercise(self, consumer: wiring.Consumer, role: Role, provider: Any) -> None:
        """Bind or initialize the slot if the strategy defers it, then invoke it."""

        def step() -> None:
            kind = self._config.strategy
            if role.name not in self._config.omit:
                if kind is StrategyKind.LAZY_AGGREGATION:
                    wiring.bind(consumer, role, provider)
                elif kind is StrategyKind.LAZY_COMPOSITION:
                    wiring.initialize(consumer, role)
            wiring.invoke(consumer, role)

        self._attempt(consumer.variant, role, step)

    def _attempt(self, variant: str, role: Role | None, action: Callable[[], T]) -> T | None:
        try:
            return action()
        except LifecycleError as e:
            failed_role = role.name if role is not None else getattr(e, "role", "?")
            message = f"{variant}.{failed_role}: {e}"
            logger.warning("Demo step failed: %s", message)
            self._report.errors.append(message)
            self._write(f"! {message}")
            return None

    def _make_services(self) -> dict[str, Capability]:
        return {
            role.name: role.bound_type(self._provider_writer)
            for role in SERVICE_ROLES
            if role.name not in self._config.omit
        }

    def _factories(self, roles: tuple[Role, ...]) -> dict[str, Callable[[], Any]]:
        return {role.name: partial(role.bound_type, self._provider_writer) for role in roles}

    @property
    def _composing(self) -> bool:
        return self._config.strategy.is_composition

    def _provider_writer(self, line: str) -> None:
        self._write(line)

    def _write(self, line: str) -> None:
        self._report.lines.append(line)
        self._writer(line)


def run_demo(config: DemoConfig, writer: Writer | None = None) -> DemoReport:
    """Run one demonstration sequence."""
    return DemoRunner(config, writer).run()
