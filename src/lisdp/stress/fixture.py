"""
Stress Fixture: Text format for LIS verification cases.

A fixture holds one input sequence and the expected answer, as
whitespace-separated integers:

    n
    a_0 a_1 ... a_{n-1}
    expected

Line breaks are not significant; only the token order is.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from lisdp.sequence import as_sequence

_INT_TOKEN_RE = re.compile(r"-?[0-9]+")


@dataclass(eq=False)
class StressCase:
    """One verification case: a sequence and its expected LIS length."""
    values: np.ndarray
    expected: int
    path: Optional[Path] = None

    @property
    def n(self):
        return len(self.values)

    def __repr__(self):
        where = f", path={str(self.path)!r}" if self.path is not None else ""
        return f"StressCase(n={self.n:,}, expected={self.expected}{where})"


def _parse_int(token, what):
    # ASCII decimal digits with optional minus sign, nothing else.
    if not _INT_TOKEN_RE.fullmatch(token):
        raise ValueError(f"Invalid {what}: {token!r} is not an integer")
    return int(token)


def parse_stress_text(text, path=None):
    """
    Parse fixture text into a StressCase.

    Parameters
    ----------
    text : str
        Fixture contents.
    path : str or Path, optional
        Recorded on the case and used in error messages.

    Returns
    -------
    StressCase

    Raises
    ------
    ValueError
        If the text is empty, a token is not an integer, or the
        token count does not match the declared length.
    """
    where = f" in {path}" if path is not None else ""
    tokens = text.split()
    if not tokens:
        raise ValueError(f"Empty stress fixture{where}")

    n = _parse_int(tokens[0], "length")
    if n < 0:
        raise ValueError(f"Negative length {n}{where}")
    if len(tokens) != n + 2:
        raise ValueError(
            f"Expected {n + 2} tokens (length, {n} values, answer){where}, "
            f"got {len(tokens)}")

    values = as_sequence([_parse_int(t, "value") for t in tokens[1:n + 1]])
    expected = _parse_int(tokens[n + 1], "expected answer")
    if expected < 0:
        raise ValueError(f"Negative expected answer {expected}{where}")

    return StressCase(values=values, expected=expected,
                      path=Path(path) if path is not None else None)


def format_stress_text(case):
    """Render a StressCase in fixture format."""
    lines = [str(case.n)]
    if case.n:
        lines.append(" ".join(str(v) for v in case.values.tolist()))
    lines.append(str(case.expected))
    return "\n".join(lines) + "\n"


def read_stress_file(path):
    """Load a fixture file. OSError from the filesystem propagates."""
    path = Path(path)
    return parse_stress_text(path.read_text(encoding="utf-8"), path=path)


def write_stress_file(case, path):
    """
    Write a fixture file, creating parent directories.

    Returns
    -------
    Path
        The written path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_stress_text(case), encoding="utf-8")
    return path
