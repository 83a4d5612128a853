"""account-contract 명령행 인터페이스.

Examples:
    # 기본 엔드포인트(GRAPHQL_CORE_URL 또는 http://localhost:8080/graphql)에 1회 실행
    account-contract

    # 5회 반복, JSON 보고서 출력
    account-contract --url http://graphql-core:8080/graphql --iterations 5 --json

    # 고정 계정 사용 (두 번째 실행부터 정상 생성 시나리오가 "Invalid Credentials"를 받음)
    account-contract --email test@gmail.com --name test --password 1234566
"""

import argparse
import asyncio
import json
import sys

import httpx
from pydantic import ValidationError

from account_contract.accounts import generate_account
from account_contract.client import GraphQLClient
from account_contract.config import VerifierSettings, load_settings
from account_contract.constants import ExitCode
from account_contract.exceptions import ConfigurationError
from account_contract.logging import configure_logging, get_logger
from account_contract.models import AccountInput, RunReport
from account_contract.reporting import format_report
from account_contract.thresholds import check_thresholds
from account_contract.verifier import ContractVerifier

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="account-contract",
        description="Verify the createAccount GraphQL contract of an account service.",
    )
    parser.add_argument("--url", help="GraphQL endpoint (default: $GRAPHQL_CORE_URL)")
    parser.add_argument("--iterations", type=int, help="Number of full scenario runs")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--email", help="Fixed account email (default: random per iteration)")
    parser.add_argument("--name", help="Account name")
    parser.add_argument("--password", help="Account password")
    parser.add_argument("--birthday", help="Account birthday (ISO-8601 timestamp)")
    parser.add_argument(
        "--inline",
        action="store_true",
        help="Embed arguments in the query text instead of sending variables",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-format", choices=["console", "json"], help="Log output format")
    return parser


def account_from_args(args: argparse.Namespace) -> AccountInput | None:
    """명령행 인자로 고정 계정을 생성합니다. 계정 인자가 없으면 None.

    Raises:
        ConfigurationError: 계정 입력값이 유효하지 않은 경우
    """
    fields = {
        "email": args.email,
        "name": args.name,
        "password": args.password,
        "birthday": args.birthday,
    }
    if all(value is None for value in fields.values()):
        return None
    try:
        return generate_account(**fields)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        raise ConfigurationError(f"Invalid account input: {errors}") from e


async def verify(
    settings: VerifierSettings,
    account: AccountInput | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[RunReport, list[str]]:
    """계약 검증을 실행하고 임계치 위반 목록과 함께 보고서를 반환합니다."""
    client = GraphQLClient(settings.url, timeout=settings.timeout, transport=transport)
    async with ContractVerifier(settings, client=client) as verifier:
        report = await verifier.run_iterations(account=account)

    violations = check_thresholds(report.error_rate, report.p95_latency_ms, settings)
    for violation in violations:
        logger.warning("threshold_violated", violation=violation)
    return report, violations


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            url=args.url,
            iterations=args.iterations,
            timeout=args.timeout,
            inline_arguments=True if args.inline else None,
            log_format=args.log_format,
        )
        account = account_from_args(args)
    except ConfigurationError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return ExitCode.CONFIGURATION_ERROR

    configure_logging(settings.log_format)
    report, violations = asyncio.run(verify(settings, account))

    if args.json:
        payload = report.model_dump(mode="json")
        payload["violations"] = violations
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(format_report(report, violations))

    return ExitCode.OK if report.passed and not violations else ExitCode.FAILED


if __name__ == "__main__":
    sys.exit(main())
