"""계정 생성 계약 시나리오 카탈로그.

각 시나리오는 요청 빌더와 기대값 목록의 쌍이며, 비동기 검증기와
Locust 부하 사용자가 같은 정의를 공유합니다.
실행 순서: 정상 생성 → 중복 계정 → 잘못된 이메일.
"""

from collections.abc import Callable
from dataclasses import dataclass

from account_contract import expectations as exp
from account_contract.constants import MALFORMED_EMAIL, ScenarioName, ServiceMessage
from account_contract.expectations import Expectation
from account_contract.models import AccountInput, MutationRequest
from account_contract.mutations import build_create_account

ACCOUNT_PATH = ("data", "createAccount")


@dataclass(frozen=True)
class Scenario:
    """요청/검증 단위.

    Attributes:
        name: 시나리오 이름
        build: (계정, 인라인 여부) → 요청
        expectations: 계정 → 기대값 목록
    """

    name: ScenarioName
    build: Callable[[AccountInput, bool], MutationRequest]
    expectations: Callable[[AccountInput], list[Expectation]]


def _created_account_expectations(account: AccountInput) -> list[Expectation]:
    return [
        exp.status_is(200),
        exp.body_is_json(),
        exp.field_present("account id present", (*ACCOUNT_PATH, "id")),
        exp.field_equals("account name matches", (*ACCOUNT_PATH, "name"), account.name),
        exp.field_truthy("account active", (*ACCOUNT_PATH, "active")),
        exp.field_present("account birthday present", (*ACCOUNT_PATH, "birthday")),
    ]


def _duplicate_expectations(account: AccountInput) -> list[Expectation]:
    # message는 동등 비교 (대입하면 어떤 응답이든 통과)
    return [
        exp.status_is(200),
        exp.error_message_is("error invalid credentials", ServiceMessage.INVALID_CREDENTIALS),
    ]


def _invalid_email_expectations(account: AccountInput) -> list[Expectation]:
    return [
        exp.status_is(200),
        exp.error_message_is("invalid email format", ServiceMessage.INVALID_EMAIL),
    ]


def _build_valid(account: AccountInput, inline: bool) -> MutationRequest:
    return build_create_account(account, inline=inline)


HAPPY_PATH = Scenario(
    name=ScenarioName.HAPPY_PATH,
    build=_build_valid,
    expectations=_created_account_expectations,
)

# 정상 생성과 동일한 요청을 한 번 더 전송
DUPLICATE = Scenario(
    name=ScenarioName.DUPLICATE,
    build=_build_valid,
    expectations=_duplicate_expectations,
)


def invalid_email_scenario(email: str = MALFORMED_EMAIL) -> Scenario:
    """이메일만 잘못된 값으로 바꾼 시나리오를 생성합니다.

    Args:
        email: 서비스가 거부해야 하는 이메일 (기본값: "invalidtest")
    """

    def build(account: AccountInput, inline: bool) -> MutationRequest:
        return build_create_account(account, email=email, inline=inline)

    return Scenario(
        name=ScenarioName.INVALID_EMAIL,
        build=build,
        expectations=_invalid_email_expectations,
    )


INVALID_EMAIL = invalid_email_scenario()

SCENARIOS: tuple[Scenario, ...] = (HAPPY_PATH, DUPLICATE, INVALID_EMAIL)
