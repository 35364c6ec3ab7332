#!/usr/bin/env python3
"""
Simple test runner for the skirmish rules engine.

Wraps pytest, ruff and pyright so the usual checks can be run with one
command from the repository root.
"""

import sys
import subprocess
import argparse


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and report whether it succeeded."""
    print(f"=== {description} ===")
    print(f"Running: {' '.join(cmd)}")

    result = subprocess.run(cmd, capture_output=True, text=True)
    print(result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr)

    if result.returncode != 0:
        print(f"FAILED: {description} (exit code {result.returncode})\n")
        return False
    print(f"OK: {description}\n")
    return True


def run_tests(target: str = "tests/", verbose: bool = True) -> bool:
    cmd = [sys.executable, "-m", "pytest", target]
    if verbose:
        cmd.append("-v")
    return run_command(cmd, f"Tests: {target}")


def find_test_file(name: str) -> str:
    """Map 'board' to the matching tests/**/test_board.py path."""
    from pathlib import Path

    if not name.startswith("test_"):
        name = f"test_{name}"
    if not name.endswith(".py"):
        name = f"{name}.py"
    matches = sorted(Path("tests").rglob(name))
    return str(matches[0]) if matches else f"tests/{name}"


def run_lint_check() -> bool:
    return run_command([sys.executable, "-m", "ruff", "check", "."], "Code Linting (Ruff)")


def run_type_check() -> bool:
    return run_command(["pyright", "skirmish"], "Type Checking (Pyright)")


def main():
    parser = argparse.ArgumentParser(
        description="Test runner for skirmish",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                    # Run all tests
  python run_tests.py --quiet            # Run tests with minimal output
  python run_tests.py --test board       # Run tests/**/test_board.py
  python run_tests.py --lint             # Run linting only
  python run_tests.py --types            # Run type checking only
  python run_tests.py --all              # Run tests, linting, and type checking
        """
    )
    parser.add_argument("--test", help="Run one test file (e.g. 'board' for test_board.py)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Run with minimal output")
    parser.add_argument("--lint", action="store_true", help="Run code linting only")
    parser.add_argument("--types", action="store_true", help="Run type checking only")
    parser.add_argument("--all", action="store_true", help="Run tests, linting, and type checking")

    args = parser.parse_args()
    verbose = not args.quiet

    if args.test:
        success = run_tests(find_test_file(args.test), verbose)
    elif args.lint:
        success = run_lint_check()
    elif args.types:
        success = run_type_check()
    elif args.all:
        success = run_tests(verbose=verbose) and run_lint_check() and run_type_check()
    else:
        success = run_tests(verbose=verbose)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
