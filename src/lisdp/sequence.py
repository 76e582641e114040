"""
LIS Sequence: Input coercion to unsigned 64-bit arrays.

Every entry point in lisdp works on a 1-D numpy.uint64 array. The length
of the sequence is always taken from the array itself, so there is no
separate count argument that could disagree with the data.

Usage:
    from lisdp.sequence import as_sequence
    a = as_sequence([15, 21, 2, 3])
"""

import numpy as np

UINT64_MAX = 2**64 - 1


def _coerce_array(arr):
    """Convert a numpy array with a numeric dtype to uint64."""
    if arr.ndim != 1:
        raise ValueError(f"Sequence must be 1-D, got shape {arr.shape}")

    kind = arr.dtype.kind
    if arr.dtype == np.uint64:
        return arr
    if kind == 'u':
        return arr.astype(np.uint64)
    if kind == 'i':
        if arr.size and arr.min() < 0:
            raise ValueError(
                f"Sequence contains negative value {int(arr.min())}; "
                f"only unsigned 64-bit integers are supported")
        return arr.astype(np.uint64)
    raise ValueError(f"Unsupported dtype {arr.dtype}, expected unsigned integers")


def as_sequence(seq):
    """
    Validate a sequence and return it as a 1-D uint64 array.

    Parameters
    ----------
    seq : iterable of int or numpy.ndarray
        Values in [0, 2**64 - 1]. A uint64 array is returned unchanged.

    Returns
    -------
    numpy.ndarray of uint64

    Raises
    ------
    ValueError
        If an element is not an integer, is out of range, or the array
        is not one-dimensional.
    """
    if isinstance(seq, np.ndarray) and seq.dtype.kind != 'O':
        return _coerce_array(seq)

    try:
        values = list(seq)
    except TypeError:
        raise ValueError(
            f"Sequence must be an iterable of integers, "
            f"got {type(seq).__name__}") from None

    for i, v in enumerate(values):
        if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
            raise ValueError(f"Element {i} is not an integer: {v!r}")
        if v < 0 or v > UINT64_MAX:
            raise ValueError(f"Element {i} out of uint64 range: {v}")

    return np.array([int(v) for v in values], dtype=np.uint64)
