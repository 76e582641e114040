"""
LIS Stress: File-driven verification of the LIS solver.

Reproduces the classic harness (one fixed self-check plus a large
fixture read from disk) with a reusable fixture format instead of a
hard-coded filename.

Example:
    from lisdp.stress import make_stress_case, write_stress_file, run_stress_file

    case = make_stress_case(30_000, seed=7)
    write_stress_file(case, "fixtures/stress_30k.txt")
    result = run_stress_file("fixtures/stress_30k.txt")
    assert result["passed"]
"""

from lisdp.stress.fixture import (
    StressCase, parse_stress_text, format_stress_text,
    read_stress_file, write_stress_file,
)
from lisdp.stress.generator import generate_sequence, make_stress_case
from lisdp.stress.runner import run_stress_case, run_stress_file, run_self_test

__all__ = [
    "StressCase", "parse_stress_text", "format_stress_text",
    "read_stress_file", "write_stress_file",
    "generate_sequence", "make_stress_case",
    "run_stress_case", "run_stress_file", "run_self_test",
]
