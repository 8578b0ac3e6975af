#!/usr/bin/env python3
"""
Unit tests for the demonstration driver, its configuration and the CLI.
"""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from dip.lifecycle import (
    DemoConfig,
    DemoRunner,
    Layout,
    Service02,
    StrategyKind,
    run_demo,
)
from dip.lifecycle.__main__ import main
from dip.lifecycle.driver import SEPARATOR

SERVICE_LINES = [
    "Service01: M1 executed",
    "Service02: M2 executed",
    "Service03: M3 executed",
]


class TestDemoConfig(unittest.TestCase):
    """Test demonstration configuration."""

    def test_defaults(self):
        config = DemoConfig(StrategyKind.LAZY_AGGREGATION)

        self.assertEqual(config.variants, ("A", "B", "C"))
        self.assertIs(config.layout, Layout.SERVICES)
        self.assertTrue(config.share_providers)
        self.assertEqual(config.omit, frozenset())

    def test_from_name(self):
        config = DemoConfig.from_name("eager_composition", layout=Layout.CAPABILITY)

        self.assertIs(config.strategy, StrategyKind.EAGER_COMPOSITION)
        self.assertIs(config.layout, Layout.CAPABILITY)
        self.assertEqual(str(config), "eager-composition (capability)")

    def test_from_unknown_name(self):
        with self.assertRaises(ValueError):
            DemoConfig.from_name("eventual-aggregation")

    def test_invalid_variants(self):
        with self.assertRaises(ValueError):
            DemoConfig(StrategyKind.LAZY_AGGREGATION, variants=())
        with self.assertRaises(ValueError):
            DemoConfig(StrategyKind.LAZY_AGGREGATION, variants=("A", "A"))

    def test_with_layout(self):
        config = DemoConfig(StrategyKind.EAGER_AGGREGATION, variants=("X",))
        capability = config.with_layout(Layout.CAPABILITY)

        self.assertIs(capability.layout, Layout.CAPABILITY)
        self.assertEqual(capability.variants, ("X",))
        self.assertIs(config.layout, Layout.SERVICES)


class TestServiceSequences(unittest.TestCase):
    """Test scripted runs with three service slots."""

    def test_every_strategy_prints_the_same_sequence(self):
        for kind in StrategyKind:
            with self.subTest(strategy=kind.value):
                written: list[str] = []
                report = run_demo(DemoConfig(kind), written.append)

                self.assertTrue(report.ok, report.errors)
                self.assertEqual(report.lines, written)
                self.assertEqual(
                    written,
                    [f"| {kind.value}:"]
                    + ["A:"] + SERVICE_LINES + [SEPARATOR]
                    + ["B:"] + SERVICE_LINES + [SEPARATOR]
                    + ["C:"] + SERVICE_LINES,
                )

    def test_private_providers(self):
        report = run_demo(
            DemoConfig(StrategyKind.EAGER_AGGREGATION, share_providers=False),
            lambda _line: None,
        )

        self.assertTrue(report.ok)
        self.assertEqual(report.lines.count("Service02: M2 executed"), 3)

    def test_unbound_lazy_slot_reported_per_variant(self):
        config = DemoConfig(StrategyKind.LAZY_AGGREGATION, omit=frozenset({"Service02"}))

        report = run_demo(config, lambda _line: None)

        self.assertFalse(report.ok)
        self.assertEqual(
            report.errors,
            [f"{v}.Service02: Slot Service02 of consumer {v} is not bound" for v in "ABC"],
        )
        self.assertEqual(report.lines.count("Service01: M1 executed"), 3)
        self.assertEqual(report.lines.count("Service03: M3 executed"), 3)

    def test_missing_eager_dependency_reported_at_construction(self):
        config = DemoConfig(
            StrategyKind.EAGER_AGGREGATION, variants=("A",), omit=frozenset({"Service02"})
        )

        report = run_demo(config, lambda _line: None)

        self.assertEqual(
            report.errors, ["A.Service02: Consumer A requires providers for: Service02"]
        )
        self.assertNotIn("Service01: M1 executed", report.lines)
        self.assertIn("! " + report.errors[0], report.lines)

    def test_lazy_composition_omitted_slot(self):
        config = DemoConfig(
            StrategyKind.LAZY_COMPOSITION, variants=("B",), omit=frozenset({"Service03"})
        )

        report = run_demo(config, lambda _line: None)

        self.assertEqual(report.errors, ["B.Service03: Slot Service03 of consumer B is not bound"])

    def test_eager_composition_notes_ignored_omit(self):
        config = DemoConfig(
            StrategyKind.EAGER_COMPOSITION, variants=("A",), omit=frozenset({"Service02"})
        )

        report = run_demo(config, lambda _line: None)

        note = "omit Service02 has no effect under eager-composition"
        self.assertTrue(report.ok)
        self.assertEqual(report.notes, [note])
        self.assertIn("~ " + note, report.lines)
        self.assertEqual([line for line in report.lines if "executed" in line], SERVICE_LINES)

    def test_no_note_without_omit(self):
        report = run_demo(DemoConfig(StrategyKind.EAGER_COMPOSITION), lambda _line: None)

        self.assertEqual(report.notes, [])

    def test_runner_can_run_twice(self):
        runner = DemoRunner(DemoConfig(StrategyKind.EAGER_COMPOSITION), lambda _line: None)

        first = runner.run()
        second = runner.run()

        self.assertEqual(first.lines, second.lines)
        self.assertIsNot(first, second)


class TestCapabilitySequences(unittest.TestCase):
    """Test scripted runs with a single capability slot."""

    def test_each_kind_is_substituted(self):
        for kind in StrategyKind:
            with self.subTest(strategy=kind.value):
                report = run_demo(
                    DemoConfig(kind, layout=Layout.CAPABILITY, variants=("A",)),
                    lambda _line: None,
                )

                self.assertTrue(report.ok, report.errors)
                self.assertEqual(report.lines, [f"| {kind.value}:", "A:"] + SERVICE_LINES)

    def test_selected_kinds_only(self):
        report = run_demo(
            DemoConfig(
                StrategyKind.LAZY_AGGREGATION,
                layout=Layout.CAPABILITY,
                variants=("C",),
                kinds=(Service02,),
            ),
            lambda _line: None,
        )

        self.assertEqual(report.lines, ["| lazy-aggregation:", "C:", "Service02: M2 executed"])

    def test_omitted_capability(self):
        report = run_demo(
            DemoConfig(
                StrategyKind.EAGER_AGGREGATION,
                layout=Layout.CAPABILITY,
                variants=("A",),
                kinds=(Service02,),
                omit=frozenset({"Capability"}),
            ),
            lambda _line: None,
        )

        self.assertEqual(
            report.errors, ["A.Capability: Consumer A requires providers for: Capability"]
        )


class TestCommandLine(unittest.TestCase):
    """Test python -m dip.lifecycle."""

    def _main(self, *args: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(args))
        return code, out.getvalue(), err.getvalue()

    def test_single_strategy(self):
        code, out, _ = self._main("lazy-aggregation")

        self.assertEqual(code, 0)
        self.assertIn("| lazy-aggregation:", out)
        self.assertNotIn("| eager-composition:", out)

    def test_all_strategies_by_default(self):
        code, out, _ = self._main()

        self.assertEqual(code, 0)
        for kind in StrategyKind:
            self.assertIn(f"| {kind.value}:", out)

    def test_capability_layout(self):
        code, out, _ = self._main("eager-aggregation", "--capability")

        self.assertEqual(code, 0)
        self.assertEqual(out.count("Service03: M3 executed"), 3)

    def test_reported_errors_exit_nonzero(self):
        code, out, _ = self._main("lazy-aggregation", "--omit=Service02")

        self.assertEqual(code, 1)
        self.assertIn("A.Service02: Slot Service02 of consumer A is not bound", out)

    def test_unknown_strategy(self):
        code, _, err = self._main("eventual-aggregation")

        self.assertEqual(code, 2)
        self.assertIn("eventual-aggregation", err)

    def test_unknown_option(self):
        code, _, err = self._main("--fast")

        self.assertEqual(code, 2)
        self.assertIn("Unknown option", err)

    def test_help(self):
        code, out, _ = self._main("--help")

        self.assertEqual(code, 0)
        self.assertIn("lazy-composition", out)


if __name__ == "__main__":
    unittest.main()
