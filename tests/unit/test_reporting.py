"""Run report rendering tests."""

from datetime import UTC, datetime

from account_contract.models import ExpectationResult, HttpResponse, RunReport, ScenarioResult
from account_contract.reporting import format_report


def _report(*results: ScenarioResult) -> RunReport:
    return RunReport(
        endpoint="http://testserver/graphql",
        started_at=datetime.now(UTC),
        iterations=[list(results)],
    )


def _passed(name: str) -> ScenarioResult:
    return ScenarioResult(
        name=name,
        expectations=[ExpectationResult(name="is status 200", passed=True, expected=200, actual=200)],
        response=HttpResponse(status_code=200, body={}, is_json=True, elapsed_ms=5.0),
    )


class TestFormatReport:
    def test_all_passed(self):
        text = format_report(_report(_passed("happy_path"), _passed("duplicate")))

        assert "Testing http://testserver/graphql" in text
        assert "✅ happy_path (status: 200)" in text
        assert "✅ All contract scenarios passed!" in text
        assert "Iteration" not in text

    def test_failed_expectation_detail(self):
        failed = ScenarioResult(
            name="duplicate",
            expectations=[
                ExpectationResult(
                    name="error invalid credentials",
                    passed=False,
                    expected="Invalid Credentials",
                    actual="Internal Server Error",
                    detail="expected 'Invalid Credentials', got 'Internal Server Error'",
                )
            ],
            response=HttpResponse(status_code=200, body={}, is_json=True),
        )

        text = format_report(_report(_passed("happy_path"), failed))

        assert "❌ duplicate (status: 200)" in text
        assert "❌ error invalid credentials: expected 'Invalid Credentials'" in text
        assert "❌ 1 of 2 scenarios failed" in text

    def test_transport_error(self):
        failed = ScenarioResult(name="happy_path", error="connection refused", error_type="TransportError")

        text = format_report(_report(failed))

        assert "❌ happy_path (status: -)" in text
        assert "TransportError: connection refused" in text

    def test_threshold_violations(self):
        text = format_report(_report(_passed("happy_path")), ["p95 latency 900.0ms exceeds limit 500.0ms"])

        assert "⚠️  p95 latency 900.0ms exceeds limit 500.0ms" in text
        assert "run thresholds were not met" in text

    def test_iterations_are_numbered(self):
        report = _report(_passed("happy_path"))
        report.iterations.append([_passed("happy_path")])

        text = format_report(report)

        assert "Iteration 1" in text
        assert "Iteration 2" in text
