"""
Command line entry point: python -m dip.lifecycle [strategy ...] [options]

Options:
    --capability     use a single Capability slot instead of three service slots
    --private        give every consumer its own providers instead of sharing them
    --omit=ROLE      withhold the provider for ROLE (repeatable); eager-composition
                     builds its own providers, so it is noted there and ignored
    --verbose        log binding activity to stderr
"""

from __future__ import annotations

import logging
import sys

from .config import DemoConfig, Layout
from .driver import run_demo
from .strategy import StrategyKind

USAGE = "Usage: python -m dip.lifecycle [strategy ...] [--capability] [--private] [--omit=ROLE] [--verbose]"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    names: list[str] = []
    layout = Layout.SERVICES
    share = True
    omit: set[str] = set()
    verbose = False

    for arg in args:
        if arg in ("-h", "--help"):
            print(USAGE)
            print("Strategies: " + ", ".join(kind.value for kind in StrategyKind))
            return 0
        elif arg == "--capability":
            layout = Layout.CAPABILITY
        elif arg == "--private":
            share = False
        elif arg.startswith("--omit="):
            omit.add(arg.split("=", 1)[1])
        elif arg == "--verbose":
            verbose = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}", file=sys.stderr)
            print(USAGE, file=sys.stderr)
            return 2
        else:
            names.append(arg)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    try:
        configs = [
            DemoConfig.from_name(name, layout=layout, share_providers=share, omit=frozenset(omit))
            for name in names or [kind.value for kind in StrategyKind]
        ]
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    failed = False
    for config in configs:
        report = run_demo(config)
        print()
        if not report.ok:
            failed = True
            print(f"❌ {report.title}: {len(report.errors)} error(s)")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
