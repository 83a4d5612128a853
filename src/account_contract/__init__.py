"""account-contract: 계정 생성 GraphQL 계약 검증기.

불투명한 HTTP/GraphQL 엔드포인트의 createAccount 뮤테이션이 문서화된
요청/응답 계약을 지키는지 검증합니다.

주요 구성 요소:
    - ContractVerifier: 정상 생성, 중복 계정, 잘못된 이메일 시나리오 실행기
    - VerifierSettings: 엔드포인트 및 실행 파라미터 설정 (GRAPHQL_CORE_ 접두사)
    - GraphQLClient: 비동기 GraphQL HTTP 클라이언트
    - AccountInput, ScenarioResult, RunReport: 데이터 모델

Example:
    >>> import asyncio
    >>> from account_contract import ContractVerifier, VerifierSettings
    >>>
    >>> async def main():
    ...     async with ContractVerifier(VerifierSettings()) as verifier:
    ...         report = await verifier.run_iterations()
    ...     return report.passed
    >>>
    >>> asyncio.run(main())
"""

from account_contract.client import GraphQLClient
from account_contract.config import VerifierSettings, load_settings
from account_contract.exceptions import (
    AssertionFailure,
    ConfigurationError,
    ContractError,
    ProtocolError,
    TransportError,
)
from account_contract.models import (
    AccountInput,
    ExpectationResult,
    HttpResponse,
    MutationRequest,
    RunReport,
    ScenarioResult,
)
from account_contract.verifier import ContractVerifier

__all__ = [
    "ContractVerifier",
    "VerifierSettings",
    "load_settings",
    "GraphQLClient",
    "AccountInput",
    "MutationRequest",
    "HttpResponse",
    "ExpectationResult",
    "ScenarioResult",
    "RunReport",
    "ContractError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "AssertionFailure",
]
