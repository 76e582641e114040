"""Tests for the stress fixture harness."""
import numpy as np
import pytest

import lisdp
from lisdp.stress import (
    StressCase, parse_stress_text, format_stress_text,
    read_stress_file, write_stress_file,
    generate_sequence, make_stress_case,
    run_stress_case, run_stress_file, run_self_test,
)


# ============================================================
# Fixture format
# ============================================================

class TestFixtureFormat:

    def test_parse_basic(self):
        case = parse_stress_text("10\n15 21 2 3 4 5 8 4 1 1\n5\n")
        assert case.n == 10
        assert case.expected == 5
        assert case.values.dtype == np.uint64
        assert case.values.tolist() == [15, 21, 2, 3, 4, 5, 8, 4, 1, 1]
        assert case.path is None

    def test_parse_any_whitespace(self):
        """Only token order matters, like reading with cin."""
        case = parse_stress_text("  3 7\n\n8 \t9   3")
        assert case.values.tolist() == [7, 8, 9]
        assert case.expected == 3

    def test_parse_empty_sequence(self):
        case = parse_stress_text("0\n0\n")
        assert case.n == 0
        assert case.expected == 0

    def test_parse_large_values(self):
        top = lisdp.UINT64_MAX
        case = parse_stress_text(f"2\n{top - 1} {top}\n2\n")
        assert case.values.tolist() == [top - 1, top]

    @pytest.mark.parametrize("text", [
        "",
        "   \n",
        "abc 1 1",
        "-1 0",
        "3 1 2 3",
        "2 1 2 3 2",
        "2 1 x 1",
        "2 1 -3 1",
        f"1 {2**64} 1",
        "1 5 -1",
        "1\n1_0\n1\n",
        "1 +5 1",
        "+1 5 1",
        "1 5 1_0",
    ])
    def test_parse_errors(self, text):
        with pytest.raises(ValueError):
            parse_stress_text(text)

    def test_error_mentions_path(self):
        with pytest.raises(ValueError, match="bad.txt"):
            parse_stress_text("", path="bad.txt")

    def test_format(self):
        case = StressCase(values=np.array([4, 1, 5], dtype=np.uint64), expected=2)
        assert format_stress_text(case) == "3\n4 1 5\n2\n"

    def test_format_empty(self):
        case = StressCase(values=np.empty(0, dtype=np.uint64), expected=0)
        assert format_stress_text(case) == "0\n0\n"

    def test_write_then_read(self, tmp_path):
        case = make_stress_case(200, seed=11)
        path = write_stress_file(case, tmp_path / "nested" / "stress.txt")
        assert path.exists()

        loaded = read_stress_file(path)
        assert loaded.path == path
        assert loaded.expected == case.expected
        assert np.array_equal(loaded.values, case.values)

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_stress_file(tmp_path / "nope.txt")

    def test_repr(self):
        case = StressCase(values=np.arange(3, dtype=np.uint64), expected=3)
        assert repr(case) == "StressCase(n=3, expected=3)"


# ============================================================
# Generator
# ============================================================

class TestGenerator:

    def test_reproducible(self):
        a = generate_sequence(100, seed=42)
        b = generate_sequence(100, seed=42)
        assert np.array_equal(a, b)

    def test_bounds(self):
        a = generate_sequence(500, low=10, high=20, seed=1)
        assert a.dtype == np.uint64
        assert len(a) == 500
        assert a.min() >= 10
        assert a.max() <= 20

    def test_full_uint64_range(self):
        a = generate_sequence(50, low=0, high=lisdp.UINT64_MAX, seed=3)
        assert a.dtype == np.uint64
        assert len(a) == 50

    def test_empty(self):
        assert len(generate_sequence(0, seed=0)) == 0

    @pytest.mark.parametrize("kwargs", [
        dict(n=-1),
        dict(n=5, low=-1),
        dict(n=5, low=10, high=5),
        dict(n=5, high=2**64),
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            generate_sequence(**kwargs)

    def test_make_case_expected(self):
        case = make_stress_case(300, high=100, seed=5)
        assert case.n == 300
        assert case.expected == lisdp.lis_length(case.values, backend="python")


# ============================================================
# Runner
# ============================================================

class TestRunner:

    def test_case_passes(self, capsys):
        case = make_stress_case(100, seed=9)
        result = run_stress_case(case, backend="numpy")
        assert result["passed"]
        assert result["result"] == case.expected
        assert result["strategy"] == "numpy"
        assert "Stress test implementation passed!" in capsys.readouterr().out

    def test_case_fails(self, capsys):
        case = StressCase(values=np.array([1, 2, 3], dtype=np.uint64), expected=2)
        result = run_stress_case(case)
        assert not result["passed"]
        assert result["result"] == 3
        assert result["strategy"] == "python"
        assert "FAILED" in capsys.readouterr().out

    def test_empty_case_reports_real_backend(self):
        case = StressCase(values=np.empty(0, dtype=np.uint64), expected=0)
        result = run_stress_case(case, verbose=False)
        assert result["passed"]
        assert result["strategy"] == "python"

    def test_stress_file_numba_against_numpy(self, tmp_path):
        """Fixture answered by numpy, checked with the auto-routed numba kernel."""
        case = make_stress_case(3000, seed=2021, backend="numpy")
        path = write_stress_file(case, tmp_path / "stress_test_file.txt")

        result = run_stress_file(path, verbose=False)
        assert result["passed"]
        assert result["n"] == 3000
        assert result["strategy"] == "numba"

    def test_self_test(self, capsys):
        assert run_self_test()
        assert "Test implementation passed!" in capsys.readouterr().out

    @pytest.mark.parametrize("backend", ["python", "numpy", "numba"])
    def test_self_test_backends(self, backend):
        assert run_self_test(backend=backend, verbose=False)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
