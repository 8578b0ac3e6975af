#!/usr/bin/env python3
"""
Demonstration of how wiring mistakes are reported.
"""

import logging

from dip.lifecycle import (
    DemoConfig,
    MissingRequiredDependency,
    OwnershipViolation,
    Service01,
    Service02,
    ServiceConsumer,
    StrategyKind,
    run_demo,
)


def main() -> None:
    print("=== Failure Demo ===\n")

    print("1. Missing constructor dependency")
    print("-" * 50)
    try:
        ServiceConsumer.aggregated("A", Service01(), None, None)
    except MissingRequiredDependency as e:
        print(f"Caught expected missing dependency: {e}")

    print("\n2. Binding into a consumer that owns its services")
    print("-" * 50)
    try:
        ServiceConsumer.composed("B").bind_service02(Service02())
    except OwnershipViolation as e:
        print(f"Caught expected ownership violation: {e}")

    print("\n3. A scripted run that never binds Service02")
    print("-" * 50)
    report = run_demo(
        DemoConfig(StrategyKind.LAZY_AGGREGATION, omit=frozenset({"Service02"}))
    )
    print(f"\nReported {len(report.errors)} error(s)")

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    main()
