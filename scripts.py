#!/usr/bin/env python3
"""
Development scripts for dip-lifecycle project.

These scripts integrate with uv to run various checks and tests.
"""

import subprocess
import sys
from pathlib import Path

PACKAGE_DIR = "src/dip/lifecycle/"


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and return True if successful."""
    print(f"\n🔄 {description}...")
    print(f"Running: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, check=True, capture_output=False)
        print(f"✅ {description} passed")
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed with exit code {e.returncode}")
        return False
    except FileNotFoundError:
        print(f"❌ Command not found: {cmd[0]}")
        return False


def run_all(checks: list[tuple[list[str], str]]) -> bool:
    """Run every check, even after a failure, and report whether all passed."""
    results = [run_command(cmd, desc) for cmd, desc in checks]
    return all(results)


def run_tests() -> int:
    """Run the test suite."""
    print("🧪 Running test suite")
    success = run_command(["uv", "run", "pytest", "-v"], "Tests")
    return 0 if success else 1


def run_lint() -> int:
    """Run linting checks."""
    print("🔍 Running linting checks")

    passed = run_all(
        [
            (["uv", "run", "ruff", "check", "."], "Ruff linting"),
            (["uv", "run", "ruff", "format", "--check", "."], "Ruff formatting"),
        ]
    )

    if not passed:
        print("\n💡 To auto-fix formatting issues, run: uv run ruff format .")
        print("💡 To auto-fix some linting issues, run: uv run ruff check --fix .")

    return 0 if passed else 1


def run_typecheck() -> int:
    """Run type checking with both mypy and pyright."""
    print("🔬 Running type checking")

    passed = run_all(
        [
            (["uv", "run", "mypy", PACKAGE_DIR], "MyPy type checking"),
            (["uv", "run", "pyright", PACKAGE_DIR], "Pyright type checking"),
        ]
    )
    return 0 if passed else 1


def run_demos() -> int:
    """Run all demo scripts and the module entry point."""
    print("🎭 Running demo scripts")

    demo_dir = Path("demo")
    if not demo_dir.exists():
        print("❌ Demo directory not found")
        return 1

    checks = [
        (["uv", "run", "python", str(demo_file)], f"Demo: {demo_file.name}")
        for demo_file in sorted(demo_dir.glob("*.py"))
        if not demo_file.name.startswith("_")
    ]
    checks.append((["uv", "run", "python", "-m", "dip.lifecycle"], "Demo: python -m dip.lifecycle"))

    return 0 if run_all(checks) else 1


def check_all() -> int:
    """Run all checks: tests, linting, type checking and demos."""
    print("🚀 Running all checks for dip-lifecycle")
    print("=" * 50)

    checks = [
        ("Tests", run_tests),
        ("Linting", run_lint),
        ("Type Checking", run_typecheck),
        ("Demos", run_demos),
    ]

    results = {}
    for name, func in checks:
        print(f"\n{'=' * 20} {name} {'=' * 20}")
        results[name] = func() == 0

    # Summary
    print(f"\n{'=' * 20} SUMMARY {'=' * 20}")
    all_passed = True
    for name, passed in results.items():
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"{name:<15} {status}")
        if not passed:
            all_passed = False

    if all_passed:
        print("\n🎉 All checks passed!")
        return 0
    else:
        print("\n💥 Some checks failed. Please fix the issues above.")
        return 1


COMMANDS = {
    "test": run_tests,
    "lint": run_lint,
    "typecheck": run_typecheck,
    "demos": run_demos,
    "check": check_all,
}


if __name__ == "__main__":
    # Allow running directly for development
    if len(sys.argv) > 1:
        command = COMMANDS.get(sys.argv[1])
        if command is None:
            print(f"Unknown command: {sys.argv[1]}")
            print(f"Available commands: {', '.join(COMMANDS)}")
            sys.exit(1)
        sys.exit(command())
    else:
        print(f"Available commands: {', '.join(COMMANDS)}")
        print("Usage: python scripts.py <command>")
