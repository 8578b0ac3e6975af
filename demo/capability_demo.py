#!/usr/bin/env python3
"""
Demonstration of a single slot typed by the Capability abstraction.

The same consumer shape is given Service01, Service02 or Service03 and calls
whichever one it holds without knowing its kind.
"""

import logging

from dip.lifecycle import (
    CapabilityConsumer,
    DemoConfig,
    Layout,
    Service01,
    Service02,
    Service03,
    StrategyKind,
    UnboundSlotAccess,
    UnsupportedOperation,
    run_demo,
)


def main() -> None:
    print("=== Capability Demo ===\n")

    print("1. Eager aggregation with each provider kind")
    print("-" * 50)
    for provider in (Service01(), Service02(), Service03()):
        CapabilityConsumer.aggregated("A", provider).invoke()

    print("\n2. Lazy aggregation: the last bind wins")
    print("-" * 50)
    consumer = CapabilityConsumer.deferred("B")
    try:
        consumer.invoke()
    except UnboundSlotAccess as e:
        print(f"Caught expected unbound access: {e}")
    consumer.bind_capability(Service01())
    consumer.invoke()
    consumer.bind_capability(Service02())
    consumer.invoke()

    print("\n3. Asking a provider for an operation it does not have")
    print("-" * 50)
    try:
        consumer.invoke("operation1")
    except UnsupportedOperation as e:
        print(f"Caught expected provider failure: {e}")

    print("\n=== Scripted sequences ===\n")
    for kind in (StrategyKind.EAGER_AGGREGATION, StrategyKind.LAZY_AGGREGATION):
        report = run_demo(DemoConfig(kind, layout=Layout.CAPABILITY))
        assert report.ok, report.errors
        print()

    print("Demo completed successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
