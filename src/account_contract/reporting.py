"""Plain-text run report."""

from account_contract.models import RunReport, ScenarioResult

RULE = "=" * 80


def format_scenario(result: ScenarioResult) -> list[str]:
    mark = "✅" if result.passed else "❌"
    status = result.response.status_code if result.response is not None else "-"
    lines = [f"{mark} {result.name} (status: {status})"]

    if result.error is not None:
        lines.append(f"   {result.error_type}: {result.error}")

    for expectation in result.expectations:
        if expectation.passed:
            lines.append(f"   ✅ {expectation.name}")
        else:
            lines.append(f"   ❌ {expectation.name}: {expectation.detail}")
    return lines


def format_report(report: RunReport, violations: list[str] | None = None) -> str:
    """Render a RunReport for the terminal.

    Args:
        report: Completed run report
        violations: Threshold violations from check_thresholds
    """
    lines = [f"Testing {report.endpoint}", RULE]

    for index, iteration in enumerate(report.iterations, start=1):
        if len(report.iterations) > 1:
            lines.append(f"Iteration {index}")
        for result in iteration:
            lines.extend(format_scenario(result))

    lines.append(RULE)
    lines.append(
        f"requests: {report.request_count}  "
        f"error rate: {report.error_rate:.2%}  "
        f"p95: {report.p95_latency_ms:.1f}ms"
    )
    for violation in violations or []:
        lines.append(f"⚠️  {violation}")

    failed = sum(1 for r in report.results if not r.passed)
    if failed:
        lines.append(f"❌ {failed} of {report.request_count} scenarios failed")
    elif violations:
        lines.append("❌ All scenarios passed but run thresholds were not met")
    else:
        lines.append("✅ All contract scenarios passed!")
    return "\n".join(lines)
