"""
LIS Detector: Auto-detection of sequence shape.

Analyzes a sequence and returns a report with:
  - Length, dtype, number of DP comparisons
  - Memory estimate for the DP table
  - Recommended computation strategy (python/numpy/numba)

Usage:
    import lisdp
    report = lisdp.detect_sequence(seq)
    print(report)
"""

import numpy as np

from lisdp.sequence import as_sequence

# Below these lengths the cheaper-to-start backend wins.
PYTHON_MAX_N = 32
NUMPY_MAX_N = 2048


def choose_strategy(n):
    """
    Pick a computation strategy from the sequence length alone.

    Returns
    -------
    (str, str)
        Strategy name and a human-readable reason.
    """
    if n == 0:
        return "empty", "Empty sequence, length is 0"
    if n < PYTHON_MAX_N:
        return "python", f"Short sequence (n={n}), pure Python loops"
    if n < NUMPY_MAX_N:
        return "numpy", f"Medium sequence (n={n:,}), vectorized inner loop"
    comparisons = n * (n - 1) // 2
    return "numba", f"Long sequence (n={n:,}, {comparisons:,} comparisons), JIT kernel"


def detect_sequence(seq):
    """
    Analyze a sequence and recommend a computation strategy.

    Parameters
    ----------
    seq : iterable of int or numpy.ndarray
        The sequence to analyze (see ``as_sequence``).

    Returns
    -------
    dict
        Structure report with n, comparisons, table size, strategy.
    """
    a = as_sequence(seq)
    n = len(a)

    if n > 1:
        increasing = bool(np.all(a[1:] > a[:-1]))
        non_increasing = bool(np.all(a[1:] <= a[:-1]))
    else:
        increasing = True
        non_increasing = True

    strategy, reason = choose_strategy(n)

    return {
        "n": n,
        "dtype": str(a.dtype),
        "comparisons": n * (n - 1) // 2,
        "table_mb": round(n * 8 / 1e6, 3),
        "is_strictly_increasing": increasing,
        "is_non_increasing": non_increasing,
        "distinct": int(np.unique(a).size),
        "strategy": strategy,
        "reason": reason,
    }
