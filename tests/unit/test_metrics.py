"""
Tests for relative error and related metrics.
"""

import pytest

from knapsack_fptas.metrics import optimality_gap, relative_error, summarize_errors
from knapsack_fptas.utils.error_handler import MetricError


class TestRelativeError:
    """Sign convention and guards."""

    def test_equal_values(self):
        assert relative_error(295, 295) == 0.0

    def test_short_of_reference_is_negative(self):
        assert relative_error(90, 100) == pytest.approx(-0.1)
        assert relative_error(0, 7) == pytest.approx(-1.0)

    def test_above_reference_is_positive(self):
        assert relative_error(110, 100) == pytest.approx(0.1)

    def test_zero_reference(self):
        with pytest.raises(MetricError):
            relative_error(5, 0)

    def test_optimality_gap(self):
        assert optimality_gap(98, 100) == pytest.approx(2.0)
        assert optimality_gap(100, 100) == 0.0


class TestSummary:
    """Aggregate statistics."""

    def test_summary(self):
        stats = summarize_errors([0.0, -0.1, -0.2])

        assert stats["count"] == 3
        assert stats["mean"] == pytest.approx(-0.1)
        assert stats["median"] == pytest.approx(-0.1)
        assert stats["min"] == pytest.approx(-0.2)
        assert stats["max"] == 0.0

    def test_empty_summary(self):
        stats = summarize_errors([])

        assert stats["count"] == 0
        assert stats["mean"] is None
