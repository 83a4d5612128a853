"""createAccount 뮤테이션 빌더 모듈.

입력값은 기본적으로 GraphQL 변수로 전달되어 쿼리 본문과 분리됩니다.
변수를 지원하지 않는 서비스를 위해 인라인 렌더링도 제공하며,
이 경우 모든 값은 GraphQL 문자열 리터럴로 이스케이프됩니다.
"""

import json

from account_contract.models import AccountInput, MutationRequest

OPERATION_NAME = "CreateAccount"

RESULT_FIELDS = "id name active birthday"

CREATE_ACCOUNT_MUTATION = (
    f"mutation {OPERATION_NAME}($user: UserInput!) "
    f"{{ createAccount(user: $user) {{ {RESULT_FIELDS} }} }}"
)

_INPUT_FIELDS = ("email", "name", "password", "birthday")


def _string_literal(value: str) -> str:
    """문자열을 GraphQL 문자열 리터럴로 변환합니다 (따옴표, 역슬래시, 제어문자 이스케이프)."""
    return json.dumps(value)


def account_variables(account: AccountInput, email: str | None = None) -> dict[str, str]:
    """계정 입력값을 UserInput 변수 딕셔너리로 변환합니다.

    Args:
        account: 계정 입력값
        email: 이메일 대체값. 잘못된 이메일 시나리오에서 사용

    Returns:
        email, name, password, birthday 키를 가진 딕셔너리
    """
    user = {field: getattr(account, field) for field in _INPUT_FIELDS}
    if email is not None:
        user["email"] = email
    return user


def render_inline(user: dict[str, str]) -> str:
    """인자를 쿼리 본문에 직접 포함한 뮤테이션을 생성합니다.

    Example:
        >>> render_inline({"email": "a@b.com", "name": "n", "password": "p",
        ...                "birthday": "2023-01-01T00:00:00Z"})
        'mutation CreateAccount { createAccount(user: { email: "a@b.com", name: "n", password: "p", birthday: "2023-01-01T00:00:00Z" }) { id name active birthday } }'
    """
    arguments = ", ".join(f"{field}: {_string_literal(user[field])}" for field in _INPUT_FIELDS)
    return (
        f"mutation {OPERATION_NAME} "
        f"{{ createAccount(user: {{ {arguments} }}) {{ {RESULT_FIELDS} }} }}"
    )


def build_create_account(
    account: AccountInput,
    *,
    email: str | None = None,
    inline: bool = False,
) -> MutationRequest:
    """createAccount 뮤테이션 요청을 생성합니다.

    Args:
        account: 계정 입력값 (변경되지 않음)
        email: 이메일 대체값
        inline: True이면 변수 대신 인라인 인자를 사용

    Returns:
        새로 생성된 불변 요청 객체
    """
    user = account_variables(account, email=email)
    if inline:
        return MutationRequest(query=render_inline(user))
    return MutationRequest(
        query=CREATE_ACCOUNT_MUTATION,
        variables={"user": user},
        operation_name=OPERATION_NAME,
    )
