"""
LIS Fast: Numba JIT-compiled kernel for the DP double loop.

The quadratic loop runs in compiled code, which makes the 30,000 element
stress fixtures practical (~450M comparisons).

Install: pip install numba
"""

import numpy as np
from numba import njit


# ============================================================
# Core kernel: DP table
# ============================================================

@njit(cache=True)
def lis_table_jit(a):
    """Fill the LIS table for a uint64 sequence.

    Parameters
    ----------
    a : numpy array of uint64
        Input sequence.

    Returns
    -------
    numpy array of int64
        lis[i] = length of the longest strictly increasing
        subsequence ending at index i.
    """
    n = a.shape[0]
    lis = np.ones(n, dtype=np.int64)
    for i in range(n):
        ai = a[i]
        for j in range(i):
            if a[j] < ai and lis[j] + 1 > lis[i]:
                lis[i] = lis[j] + 1
    return lis


def warmup():
    """Trigger JIT compilation with a small dummy call.

    Call this once before timing real computations so that the
    compilation cost is not counted.
    """
    dummy = np.array([2, 1, 3], dtype=np.uint64)
    lis_table_jit(dummy)
