#!/usr/bin/env python3
"""
Standalone runner for the pysteamtoolbox IF97 validation suite.

Usage: python3 pysteamtoolbox/tests/run_all_tests.py [name ...]
       e.g. run_all_tests.py region3 selector   (runs test_region3.py and test_selector.py)
Or with pytest: python3 -m pytest pysteamtoolbox/tests/ -v
"""

import glob
import importlib
import os
import sys
import time

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(TESTS_DIR, '..', '..'))
sys.path.insert(0, TESTS_DIR)


def discover(filters):
    """ Test module names in this directory, optionally restricted to those containing any filter string """
    names = sorted(os.path.splitext(os.path.basename(f))[0] for f in glob.glob(os.path.join(TESTS_DIR, 'test_*.py')))
    if filters:
        names = [n for n in names if any(f in n for f in filters)]
    return names


def title(mod):
    # Module docstring up to its "Run with:" line, joined onto one line
    lines = []
    for line in (mod.__doc__ or '').strip().splitlines():
        if not line.strip() or line.startswith('Run with'):
            break
        lines.append(line.strip())
    return ' '.join(lines) or mod.__name__


def run(name):
    try:
        mod = importlib.import_module(name)
    except Exception as e:
        print(f"\n--- {name} ---\n  IMPORT ERROR: {type(e).__name__}: {e}")
        return 0, [(name, f"import failed: {e}")]

    print(f"\n--- {title(mod)} ({name}.py) ---")
    tests = sorted((k, v) for k, v in vars(mod).items() if k.startswith('test_') and callable(v))
    passed, failures = 0, []
    start = time.perf_counter()
    for test_name, func in tests:
        try:
            func()
        except Exception as e:
            failures.append((f"{name}::{test_name}", f"{type(e).__name__}: {e}"))
            print(f"    FAIL: {test_name}\n          {type(e).__name__}: {e}")
        else:
            passed += 1
            print(f"    PASS: {test_name}")
    print(f"  {passed}/{len(tests)} passed in {time.perf_counter() - start:.2f} s")
    return passed, failures


def main(argv):
    names = discover(argv)
    if not names:
        print(f"No test modules match {argv}")
        return 1

    print("=" * 70)
    print(f"pysteamtoolbox IF97 validation: {len(names)} module(s)")
    print("=" * 70)

    total_passed, all_failures = 0, []
    for name in names:
        passed, failures = run(name)
        total_passed += passed
        all_failures.extend(failures)

    print(f"\n{'=' * 70}")
    print(f"TOTAL: {total_passed} passed, {len(all_failures)} failed")
    for where, msg in all_failures:
        print(f"  - {where}: {msg}")
    print("=" * 70)
    return 1 if all_failures else 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
