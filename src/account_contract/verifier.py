"""계정 생성 계약 검증기.

하나의 엔드포인트에 대해 정상 생성, 중복 계정, 잘못된 이메일 시나리오를
순서대로 실행하고 기대값별 통과 여부를 보고합니다.
어떤 시나리오가 실패하더라도 나머지 시나리오는 항상 실행됩니다.
"""

from datetime import UTC, datetime
from types import TracebackType

import structlog

from account_contract.accounts import generate_account
from account_contract.client import GraphQLClient
from account_contract.config import VerifierSettings
from account_contract.constants import MALFORMED_EMAIL
from account_contract.exceptions import TransportError
from account_contract.expectations import evaluate
from account_contract.models import AccountInput, RunReport, ScenarioResult
from account_contract.scenarios import DUPLICATE, HAPPY_PATH, Scenario, invalid_email_scenario

logger = structlog.get_logger(__name__)


class ContractVerifier:
    """계정 생성 계약 검증기.

    Args:
        settings: 검증기 설정 (엔드포인트, 타임아웃, 반복 횟수 등)
        client: GraphQL 클라이언트. 미지정 시 설정값으로 생성

    Example:
        >>> async with ContractVerifier(VerifierSettings()) as verifier:
        ...     results = await verifier.run()
        ...     print([r.passed for r in results])
    """

    def __init__(self, settings: VerifierSettings, client: GraphQLClient | None = None) -> None:
        self.settings = settings
        self.client = client or GraphQLClient(settings.url, timeout=settings.timeout)

    async def __aenter__(self) -> "ContractVerifier":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.client.close()

    async def run_scenario(self, scenario: Scenario, account: AccountInput) -> ScenarioResult:
        """시나리오 하나를 실행합니다.

        요청은 정확히 한 번 전송되며 재시도하지 않습니다.
        전송 오류는 예외 대신 실패한 결과로 반환됩니다.

        Args:
            scenario: 실행할 시나리오
            account: 계정 입력값

        Returns:
            시나리오 실행 결과
        """
        request = scenario.build(account, self.settings.inline_arguments)
        log = logger.bind(scenario=str(scenario.name), url=self.settings.url)

        try:
            response = await self.client.execute(request)
        except TransportError as e:
            log.warning("scenario_transport_error", error=e.message)
            return ScenarioResult(
                name=str(scenario.name),
                error=e.message,
                error_type=type(e).__name__,
            )

        result = ScenarioResult(
            name=str(scenario.name),
            expectations=evaluate(scenario.expectations(account), response),
            response=response,
        )

        if result.passed:
            log.info(
                "scenario_passed",
                status_code=response.status_code,
                elapsed_ms=round(response.elapsed_ms, 2),
            )
        else:
            log.warning(
                "scenario_failed",
                status_code=response.status_code,
                failures={f.name: f.detail for f in result.failures},
            )
        return result

    async def run_happy_path(self, account: AccountInput) -> ScenarioResult:
        """유효한 계정을 생성하고 생성된 계정 정보를 검증합니다."""
        return await self.run_scenario(HAPPY_PATH, account)

    async def run_duplicate(self, account: AccountInput) -> ScenarioResult:
        """정상 생성과 동일한 요청을 다시 보내 "Invalid Credentials" 오류를 검증합니다.

        Args:
            account: 정상 생성 시나리오에 사용한 것과 같은 계정 입력값
        """
        return await self.run_scenario(DUPLICATE, account)

    async def run_invalid_email(
        self, account: AccountInput, email: str = MALFORMED_EMAIL
    ) -> ScenarioResult:
        """이메일만 잘못된 값으로 바꿔 'Invalid Argument: "invalid email"' 오류를 검증합니다.

        Args:
            account: 계정 입력값 (이메일 외 필드 사용)
            email: 잘못된 이메일 (기본값: "invalidtest")
        """
        return await self.run_scenario(invalid_email_scenario(email), account)

    async def run(self, account: AccountInput | None = None) -> list[ScenarioResult]:
        """세 시나리오를 고정된 순서로 한 번 실행합니다.

        Args:
            account: 계정 입력값. 미지정 시 고유한 이메일로 새로 생성

        Returns:
            정상 생성, 중복 계정, 잘못된 이메일 순서의 결과 목록
        """
        account = account or generate_account()
        logger.info("contract_run_started", url=self.settings.url, email=account.email)

        results = [
            await self.run_happy_path(account),
            await self.run_duplicate(account),
            await self.run_invalid_email(account),
        ]

        logger.info(
            "contract_run_finished",
            url=self.settings.url,
            passed=sum(1 for r in results if r.passed),
            failed=sum(1 for r in results if not r.passed),
        )
        return results

    async def run_iterations(
        self,
        iterations: int | None = None,
        account: AccountInput | None = None,
    ) -> RunReport:
        """전체 시나리오를 여러 번 반복 실행합니다.

        계정을 지정하지 않으면 반복마다 새 계정을 생성합니다. 계정을 지정하면
        두 번째 반복부터 정상 생성 시나리오도 "Invalid Credentials"를 받게 됩니다.

        Args:
            iterations: 반복 횟수. 미지정 시 settings.iterations
            account: 모든 반복에 사용할 계정 입력값

        Returns:
            실행 보고서
        """
        count = iterations if iterations is not None else self.settings.iterations
        report = RunReport(endpoint=self.settings.url, started_at=datetime.now(UTC))

        for _ in range(count):
            report.iterations.append(await self.run(account))

        report.finished_at = datetime.now(UTC)
        return report
