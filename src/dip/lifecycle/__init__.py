"""
dip.lifecycle - dependency lifecycle and binding strategies.

This library shows how a consumer acquires the services it depends on:
- Eager composition: the consumer builds and owns its providers
- Eager aggregation: fully built providers are passed to the constructor
- Lazy aggregation: providers are bound after construction, one slot at a time
- Lazy composition: the consumer builds a provider when a slot is initialized

Slots can be typed by a concrete provider or by the Capability abstraction.
"""

from .config import DemoConfig, Layout
from .consumers import CapabilityConsumer, ServiceConsumer
from .driver import DemoReport, DemoRunner, run_demo
from .errors import (
    IncompatibleProvider,
    LifecycleError,
    MissingProviderFactory,
    MissingRequiredDependency,
    OwnershipViolation,
    ProviderOperationFailure,
    UnboundSlotAccess,
    UnexpectedProvider,
    UnknownRole,
    UnsupportedOperation,
)
from .providers import Capability, Service01, Service02, Service03
from .roles import CAPABILITY, SERVICE01, SERVICE02, SERVICE03, SERVICE_ROLES, Role
from .slots import UNBOUND, Bound, ServiceSlot, SlotBundle, Unbound
from .strategy import (
    BindingStrategy,
    EagerAggregation,
    EagerComposition,
    LazyAggregation,
    LazyComposition,
    StrategyKind,
    strategy_for,
)
from .wiring import Consumer, assemble, bind, initialize, invoke, resolve

__all__ = [
    "BindingStrategy",
    "Bound",
    "CAPABILITY",
    "Capability",
    "CapabilityConsumer",
    "Consumer",
    "DemoConfig",
    "DemoReport",
    "DemoRunner",
    "EagerAggregation",
    "EagerComposition",
    "IncompatibleProvider",
    "Layout",
    "LazyAggregation",
    "LazyComposition",
    "LifecycleError",
    "MissingProviderFactory",
    "MissingRequiredDependency",
    "OwnershipViolation",
    "ProviderOperationFailure",
    "Role",
    "SERVICE01",
    "SERVICE02",
    "SERVICE03",
    "SERVICE_ROLES",
    "Service01",
    "Service02",
    "Service03",
    "ServiceConsumer",
    "ServiceSlot",
    "SlotBundle",
    "StrategyKind",
    "UNBOUND",
    "UnboundSlotAccess",
    "Unbound",
    "UnexpectedProvider",
    "UnknownRole",
    "UnsupportedOperation",
    "assemble",
    "bind",
    "initialize",
    "invoke",
    "resolve",
    "run_demo",
    "strategy_for",
]
