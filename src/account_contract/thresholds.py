"""Run-level pass/fail gates (error rate, p95 latency)."""

import math
from collections.abc import Sequence

from account_contract.config import VerifierSettings


def percentile(values: Sequence[float], q: float) -> float:
    """Nearest-rank percentile. Returns 0.0 for an empty sequence."""
    if not values:
        return 0.0
    if not 0 < q <= 100:  # noqa: PLR2004
        raise ValueError(f"Percentile must be in (0, 100]: {q}")
    ordered = sorted(values)
    rank = math.ceil(q / 100 * len(ordered))
    return float(ordered[rank - 1])


def check_thresholds(
    error_rate: float,
    p95_latency_ms: float,
    settings: VerifierSettings,
) -> list[str]:
    """Evaluate the run gates.

    Args:
        error_rate: Fraction of failed requests (0.0 - 1.0)
        p95_latency_ms: 95th-percentile request latency in milliseconds
        settings: Verifier settings holding the limits

    Returns:
        Violation messages; empty when every gate holds
    """
    violations: list[str] = []

    # Both gates are strict upper bounds
    if error_rate >= settings.max_error_rate and error_rate > 0:
        violations.append(
            f"error rate {error_rate:.2%} exceeds limit {settings.max_error_rate:.2%}"
        )
    if p95_latency_ms >= settings.p95_latency_ms:
        violations.append(
            f"p95 latency {p95_latency_ms:.1f}ms exceeds limit {settings.p95_latency_ms:.1f}ms"
        )

    return violations
