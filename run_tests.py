#!/usr/bin/env python3
"""
Test runner script for the Hebrew calendar and Tachanun tests.

Discovers and runs the unit tests in the tests/ directory with the
built-in unittest framework.

Usage:
    python run_tests.py                  # Run all tests
    python run_tests.py -q               # Run with less output
    python run_tests.py test_tachanun    # Run tests in matching modules
"""

import argparse
import os
import sys
import unittest

# Add project root to path
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)


def run_tests(test_pattern: str = "test_", verbosity: int = 2) -> int:
    """Discover and run tests whose module name starts with `test_pattern`.

    Returns:
        Process exit code (0 for success, 1 for failure)
    """
    tests_dir = os.path.join(project_root, "tests")
    suite = unittest.TestLoader().discover(tests_dir, pattern=f"{test_pattern}*.py")
    result = unittest.TextTestRunner(verbosity=verbosity).run(suite)
    return 0 if result.wasSuccessful() else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the unit tests")
    parser.add_argument("pattern", nargs="?", default="test_", help="test module name prefix")
    parser.add_argument("-q", "--quiet", action="store_true", help="less output")
    args = parser.parse_args()

    print("=" * 70)
    print("Hebrew Calendar & Tachanun - Unit Tests")
    print("=" * 70)
    print()

    exit_code = run_tests(args.pattern, verbosity=1 if args.quiet else 2)

    print()
    print("=" * 70)
    print("All tests passed!" if exit_code == 0 else "Some tests failed.")
    print("=" * 70)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
