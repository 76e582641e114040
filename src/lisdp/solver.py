"""
LIS Solver: Auto-routing longest increasing subsequence length.

Computes the O(n^2) dynamic-programming table and routes the double
loop to the best backend for the input size:
  - Short sequences -> pure Python lists
  - Medium sequences -> numpy (vectorized inner loop)
  - Long sequences -> numba JIT kernel

Every backend fills exactly the same table; only the speed differs.

Usage:
    import lisdp
    length = lisdp.lis_length([15, 21, 2, 3, 4, 5, 8, 4, 1, 1])  # 5
"""

import os
import sys
import time
from concurrent.futures import ProcessPoolExecutor

import numpy as np

from lisdp import fast as _fast
from lisdp.detector import choose_strategy
from lisdp.sequence import as_sequence

BACKENDS = ("auto", "python", "numpy", "numba")


def _table_python(a):
    values = a.tolist()
    n = len(values)
    lis = [1] * n
    for i in range(n):
        for j in range(i):
            if values[j] < values[i] and lis[j] + 1 > lis[i]:
                lis[i] = lis[j] + 1
    return np.array(lis, dtype=np.int64)


def _table_numpy(a):
    n = len(a)
    lis = np.ones(n, dtype=np.int64)
    for i in range(1, n):
        smaller = a[:i] < a[i]
        if smaller.any():
            lis[i] = lis[:i][smaller].max() + 1
    return lis


_KERNELS = {
    "python": _table_python,
    "numpy": _table_numpy,
    "numba": _fast.lis_table_jit,
}


def _resolve_backend(a, backend):
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
    if backend != "auto":
        return backend
    strategy, _ = choose_strategy(len(a))
    # Nothing to loop over; any kernel returns an empty table.
    return "python" if strategy == "empty" else strategy


def select_backend(seq, backend="auto"):
    """
    Name of the kernel lis_length would run for this sequence.

    Always one of 'python', 'numpy' or 'numba'.
    """
    return _resolve_backend(as_sequence(seq), backend)


def lis_table(seq, backend="auto"):
    """
    Compute the DP table of longest increasing subsequence lengths.

    Parameters
    ----------
    seq : iterable of int or numpy.ndarray
        Unsigned 64-bit integers. Not modified.
    backend : str
        'auto' (default), 'python', 'numpy' or 'numba'.

    Returns
    -------
    numpy.ndarray of int64
        lis[i] = length of the longest strictly increasing subsequence
        ending exactly at index i.
    """
    a = as_sequence(seq)
    kernel = _KERNELS[_resolve_backend(a, backend)]
    return kernel(a)


def lis_length(seq, backend="auto", verbose=False):
    """
    Length of the longest strictly increasing subsequence.

    Parameters
    ----------
    seq : iterable of int or numpy.ndarray
        Unsigned 64-bit integers, any length (including 0).
    backend : str
        'auto' (default), 'python', 'numpy' or 'numba'.
    verbose : bool
        Print strategy and timing info.

    Returns
    -------
    int
        0 for an empty sequence, otherwise max over the DP table.
    """
    a = as_sequence(seq)
    resolved = _resolve_backend(a, backend)

    t0 = time.time()
    table = _KERNELS[resolved](a)
    length = int(table.max()) if len(table) else 0

    if verbose:
        print(f"  [LIS] n={len(a):,}, strategy={resolved}, "
              f"length={length} [{time.time() - t0:.3f}s]")
        sys.stdout.flush()

    return length


def _length_worker(args):
    """Worker function for parallel batch evaluation."""
    a, backend = args
    return lis_length(a, backend=backend)


def lis_length_batch(sequences, backend="auto", max_workers=None):
    """
    Evaluate many independent sequences in worker processes.

    Parameters
    ----------
    sequences : iterable of sequences
        Each one is validated in the calling process before dispatch.
    backend : str
        Backend used by every worker.
    max_workers : int, optional
        Process count. Defaults to min(len(sequences), cpu_count).
        With 1 worker everything runs inline.

    Returns
    -------
    list of int
        Lengths, in the same order as the input.
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")

    arrays = [as_sequence(s) for s in sequences]
    if not arrays:
        return []

    if max_workers is None:
        max_workers = min(len(arrays), os.cpu_count() or 1)

    if max_workers <= 1 or len(arrays) == 1:
        return [lis_length(a, backend=backend) for a in arrays]

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_length_worker, [(a, backend) for a in arrays]))
