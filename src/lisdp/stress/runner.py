"""
Stress Runner: Check lis_length against fixtures.

Mismatches are reported (passed=False), not raised, so a caller can run
a whole directory of fixtures and summarize.
"""

import sys
import time

from lisdp.solver import lis_length, select_backend
from lisdp.stress.fixture import read_stress_file

# Longest increasing subsequence is 2, 3, 4, 5, 8.
SELF_TEST_SEQUENCE = (15, 21, 2, 3, 4, 5, 8, 4, 1, 1)
SELF_TEST_EXPECTED = 5


def run_stress_case(case, backend="auto", verbose=True):
    """
    Run lis_length on a StressCase and compare with the expected answer.

    Parameters
    ----------
    case : StressCase
    backend : str
        Backend passed to lis_length ('auto' routes by size).
    verbose : bool
        Print the outcome.

    Returns
    -------
    dict
        n, expected, result, passed, strategy, time.
    """
    strategy = select_backend(case.values, backend)

    t0 = time.time()
    result = lis_length(case.values, backend=strategy)
    elapsed = time.time() - t0
    passed = result == case.expected

    if verbose:
        if passed:
            print("Stress test implementation passed!")
        else:
            print(f"  [Stress] FAILED n={case.n:,}: "
                  f"expected {case.expected}, got {result}")
        print(f"  [Stress] n={case.n:,}, strategy={strategy} [{elapsed:.2f}s]")
        sys.stdout.flush()

    return {
        "n": case.n,
        "expected": case.expected,
        "result": result,
        "passed": passed,
        "strategy": strategy,
        "time": elapsed,
    }


def run_stress_file(path, backend="auto", verbose=True):
    """Read a fixture file and run it (see ``run_stress_case``)."""
    case = read_stress_file(path)
    if verbose:
        print(f"  [Stress] Loaded {case.path} (n={case.n:,})")
    return run_stress_case(case, backend=backend, verbose=verbose)


def run_self_test(backend="auto", verbose=True):
    """Check the built-in scenario [15, 21, 2, 3, 4, 5, 8, 4, 1, 1] -> 5."""
    result = lis_length(list(SELF_TEST_SEQUENCE), backend=backend)
    passed = result == SELF_TEST_EXPECTED
    if verbose:
        if passed:
            print("Test implementation passed!")
        else:
            print(f"  [Stress] Self-test FAILED: expected {SELF_TEST_EXPECTED}, got {result}")
    return passed
