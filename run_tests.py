#!/usr/bin/env python3
"""
Main test runner for the sexpr reader.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_checks():
    """Parse and render a few representative inputs."""

    print("🚀 sexpr Reader Test Suite")
    print("=" * 60)

    try:
        from sexpr import parse_string, render, ParseError

        print("✅ All sexpr modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import sexpr modules: {e}")
        return False

    print("Testing reader round trips...")
    samples = [
        "2398475",
        "78435.67768",
        "last-name",
        "(+ 1 (- 2 3))",
        "(1 2.5 (3 (4.0)) ())",
    ]

    for source in samples:
        try:
            expr = parse_string(source)
            rendered = render(expr)
            if parse_string(rendered) != expr:
                print(f"  ❌ {source!r} did not survive a round trip (got {rendered!r})")
                return False
            print(f"  ✅ {source!r} -> {rendered}")
        except ParseError as e:
            print(f"  ❌ {source!r} failed to parse: {e}")
            return False

    print()
    print("Testing error reporting...")
    failures = {
        ")": "')' has no matching '('",
        "(": "expected closing ')'",
        '"abc': "unclosed string",
        "9223372036854775808": "error while parsing int, number too large to fit in target type",
    }

    for source, expected in failures.items():
        try:
            parse_string(source)
        except ParseError as e:
            if str(e) != expected:
                print(f"  ❌ {source!r} reported {str(e)!r}, expected {expected!r}")
                return False
            print(f"  ✅ {source!r} -> {e}")
        else:
            print(f"  ❌ {source!r} parsed without error")
            return False

    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/ with unittest."""
    print("Running unit tests...")
    print("-" * 60)

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), pattern="test_*.py")
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


def run_all_tests():
    if not run_smoke_checks():
        return False

    if not run_unit_tests():
        print("❌ Unit tests FAILED")
        return False

    print()
    print("🎉 All tests PASSED!")
    return True


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
