"""
lisdp - Longest Increasing Subsequence engine
=============================================

Quadratic dynamic-programming LIS length with auto-routed backends
(pure Python, numpy, numba) plus a file-driven stress harness.

Quick start:
    import lisdp

    # Inspect a sequence and the backend it would use
    report = lisdp.detect_sequence(seq)

    # Length of the longest strictly increasing subsequence
    n = lisdp.lis_length([15, 21, 2, 3, 4, 5, 8, 4, 1, 1])  # 5

    # Check against a fixture file
    from lisdp.stress import run_stress_file
    run_stress_file("stress_test_file.txt")

License: MIT
"""

__version__ = "0.1.0"

from lisdp.sequence import as_sequence, UINT64_MAX
from lisdp.detector import detect_sequence, choose_strategy
from lisdp.solver import lis_table, lis_length, lis_length_batch, select_backend
from lisdp import stress

__all__ = [
    "as_sequence", "UINT64_MAX", "detect_sequence", "choose_strategy",
    "lis_table", "lis_length", "lis_length_batch", "select_backend", "stress",
]
