#!/usr/bin/env python3
"""
Demonstration of the four binding strategies with three concrete service slots.

Consumers A, B and C are built the same way under each strategy; once their
slots are bound they all print the same thing.
"""

import logging

from dip.lifecycle import (
    DemoConfig,
    Service01,
    Service02,
    Service03,
    ServiceConsumer,
    StrategyKind,
    run_demo,
)


def manual_walkthrough() -> None:
    print("1. Eager composition: A builds and owns its services")
    print("-" * 50)
    a = ServiceConsumer.composed("A")
    a.service01.operation1()
    a.service02.operation2()
    a.service03.operation3()

    print("\n2. Eager aggregation: B and C share the same three services")
    print("-" * 50)
    services = (Service01(), Service02(), Service03())
    b = ServiceConsumer.aggregated("B", *services)
    c = ServiceConsumer.aggregated("C", *services)
    print(f"B and C hold the same Service02: {b.service02 is c.service02}")

    print("\n3. Lazy aggregation: services arrive after construction")
    print("-" * 50)
    lazy = ServiceConsumer.deferred("A")
    lazy.bind_service01(Service01())
    lazy.service01.operation1()
    lazy.bind_service02(Service02())
    lazy.service02.operation2()
    lazy.bind_service03(Service03())
    lazy.service03.operation3()

    print("\n4. Lazy composition: the consumer builds each service on request")
    print("-" * 50)
    on_demand = ServiceConsumer.on_demand("B")
    on_demand.initialize_service01().operation1()
    print(f"Service02 bound yet: {on_demand.slots.is_bound('Service02')}")


def main() -> None:
    print("=== Binding Strategy Demo ===\n")
    manual_walkthrough()

    print("\n=== Scripted sequences ===\n")
    for kind in StrategyKind:
        report = run_demo(DemoConfig(kind))
        assert report.ok, report.errors
        print()

    print("Demo completed successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
