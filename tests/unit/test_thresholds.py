"""Run gate tests."""

import pytest

from account_contract.config import VerifierSettings
from account_contract.thresholds import check_thresholds, percentile


class TestPercentile:
    def test_empty(self):
        assert percentile([], 95) == 0.0

    def test_single_value(self):
        assert percentile([42.0], 95) == 42.0

    def test_nearest_rank(self):
        values = list(range(1, 101))  # 1..100

        assert percentile(values, 95) == 95.0
        assert percentile(values, 50) == 50.0
        assert percentile(values, 100) == 100.0

    def test_unsorted_input(self):
        assert percentile([300, 100, 200], 95) == 300.0

    @pytest.mark.parametrize("q", [0, -1, 101])
    def test_out_of_range(self, q):
        with pytest.raises(ValueError):
            percentile([1.0], q)


class TestCheckThresholds:
    """Error rate < 1%, p95 < 500ms by default."""

    def test_within_limits(self):
        assert check_thresholds(0.0, 120.0, VerifierSettings()) == []

    def test_error_rate_violation(self):
        violations = check_thresholds(0.02, 120.0, VerifierSettings())

        assert len(violations) == 1
        assert "error rate" in violations[0]

    def test_error_rate_at_limit_is_violation(self):
        assert check_thresholds(0.01, 120.0, VerifierSettings()) != []

    def test_latency_violation(self):
        violations = check_thresholds(0.0, 750.0, VerifierSettings())

        assert len(violations) == 1
        assert "p95 latency" in violations[0]

    def test_both_violations(self):
        assert len(check_thresholds(0.5, 900.0, VerifierSettings())) == 2

    def test_zero_error_budget_allows_clean_run(self):
        settings = VerifierSettings(max_error_rate=0.0)

        assert check_thresholds(0.0, 10.0, settings) == []
        assert check_thresholds(0.001, 10.0, settings) != []

    def test_custom_latency_limit(self):
        settings = VerifierSettings(p95_latency_ms=1000)

        assert check_thresholds(0.0, 750.0, settings) == []
