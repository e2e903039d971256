#!/usr/bin/env python3
"""Format and lint RSS Notes with Ruff."""

import argparse
import glob
import os
import subprocess
import sys

DEFAULT_PATHS = ["src", "tests", "run_rss_notes.py", "run_tests.py", "setup.py", "lint.py"]


def collect_python_files(path_patterns):
    """Expand directories and glob patterns into a sorted list of Python files."""
    found = set()
    for pattern in path_patterns:
        if os.path.isdir(pattern):
            found.update(glob.glob(os.path.join(pattern, "**", "*.py"), recursive=True))
        else:
            found.update(glob.glob(pattern, recursive=True))
    return sorted(path for path in found if os.path.isfile(path) and path.endswith(".py"))


def run_ruff(step, command):
    """Run one Ruff command and echo its output. Returns the exit code."""
    print(f"\n--- Ruff {step} ---")
    print(f"Running: {' '.join(command)}")
    result = subprocess.run(command, capture_output=True, text=True)
    if result.stdout:
        print(result.stdout)
    if result.stderr:
        print(result.stderr, file=sys.stderr)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Format and lint the code base with Ruff")
    parser.add_argument(
        "--paths",
        nargs="+",
        default=DEFAULT_PATHS,
        help=f"Files, directories or globs to process (default: {' '.join(DEFAULT_PATHS)})",
    )
    parser.add_argument("--statistics", action="store_true", help="Show rule statistics")
    args = parser.parse_args()

    files = collect_python_files(args.paths)
    if not files:
        print("Nothing to lint.")
        return 0

    if run_ruff("format", ["ruff", "format", *files]) != 0:
        print("Formatting failed.", file=sys.stderr)

    check_command = ["ruff", "check", "--fix", *files]
    if args.statistics:
        check_command.append("--statistics")
    if run_ruff("check", check_command) != 0:
        print("Ruff check reported problems that could not be fixed.", file=sys.stderr)
        return 1

    print("Ruff format and check passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
