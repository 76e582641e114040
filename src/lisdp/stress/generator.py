"""
Stress Generator: Reproducible random fixtures.

Sequences are drawn uniformly from [low, high] with numpy's Generator,
so the same seed always yields the same fixture.
"""

import numpy as np

from lisdp.sequence import UINT64_MAX
from lisdp.solver import lis_length
from lisdp.stress.fixture import StressCase


def generate_sequence(n, low=0, high=1_000_000_000, seed=None):
    """
    Draw a random uint64 sequence.

    Parameters
    ----------
    n : int
        Sequence length (>= 0).
    low, high : int
        Inclusive value range, 0 <= low <= high <= 2**64 - 1.
    seed : int, optional
        Seed for numpy.random.default_rng.

    Returns
    -------
    numpy.ndarray of uint64
    """
    if n < 0:
        raise ValueError(f"Length must be non-negative, got {n}")
    if low < 0:
        raise ValueError(f"low must be non-negative, got {low}")
    if high < low:
        raise ValueError(f"high ({high}) must be >= low ({low})")
    if high > UINT64_MAX:
        raise ValueError(f"high ({high}) exceeds uint64 range")

    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=n, dtype=np.uint64, endpoint=True)


def make_stress_case(n, low=0, high=1_000_000_000, seed=None, backend="numpy"):
    """
    Generate a StressCase with its expected answer filled in.

    The expected answer is computed with ``backend`` so that a fixture
    made with one backend can be used to check another.
    """
    values = generate_sequence(n, low=low, high=high, seed=seed)
    return StressCase(values=values, expected=lis_length(values, backend=backend))
