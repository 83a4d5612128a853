"""계약 검증기 데이터 모델 모듈.

계정 입력값, GraphQL 요청, 정규화된 HTTP 응답, 시나리오 결과 등의
Pydantic 모델을 정의합니다.
"""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, computed_field, field_validator

from account_contract.exceptions import AssertionFailure, ProtocolError, TransportError
from account_contract.thresholds import percentile


class AccountInput(BaseModel):
    """계정 생성 입력 모델.

    정상 시나리오에서 그대로 유효해야 하며, 중복 시나리오는 같은 인스턴스를
    변경 없이 재사용합니다.

    Attributes:
        email: 이메일 주소
        name: 사용자 이름
        password: 비밀번호
        birthday: 생년월일 타임스탬프 문자열 (ISO-8601)
    """

    model_config = ConfigDict(frozen=True)

    email: EmailStr
    name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    birthday: str

    @field_validator("birthday")
    @classmethod
    def validate_birthday(cls, v: str) -> str:
        """생년월일 검증 (ISO-8601 타임스탬프)"""
        try:
            datetime.fromisoformat(v)
        except ValueError as e:
            raise ValueError(f"birthday must be an ISO-8601 timestamp: {v!r}") from e
        return v


class MutationRequest(BaseModel):
    """GraphQL 뮤테이션 요청 모델.

    Attributes:
        query: GraphQL 뮤테이션 본문
        variables: 뮤테이션 변수. 인라인 모드에서는 None
        operation_name: 실행할 오퍼레이션 이름
    """

    model_config = ConfigDict(frozen=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """HTTP 요청 본문으로 직렬화할 딕셔너리를 반환합니다."""
        payload: dict[str, Any] = {"query": self.query}
        if self.variables is not None:
            payload["variables"] = self.variables
        if self.operation_name:
            payload["operationName"] = self.operation_name
        return payload


class HttpResponse(BaseModel):
    """정규화된 HTTP 응답 모델.

    Attributes:
        status_code: HTTP 상태 코드
        body: JSON으로 파싱된 본문, 파싱 불가 시 원문 문자열
        is_json: 본문이 JSON으로 파싱되었는지 여부
        elapsed_ms: 요청 소요 시간 (밀리초)
    """

    status_code: int
    body: Any = None
    is_json: bool = False
    elapsed_ms: float = 0.0

    @classmethod
    def from_text(cls, status_code: int, text: str, elapsed_ms: float = 0.0) -> "HttpResponse":
        """응답 원문으로부터 모델을 생성합니다."""
        try:
            return cls(
                status_code=status_code,
                body=json.loads(text),
                is_json=True,
                elapsed_ms=elapsed_ms,
            )
        except ValueError:
            return cls(status_code=status_code, body=text, is_json=False, elapsed_ms=elapsed_ms)

    def json_body(self) -> Any:
        """파싱된 JSON 본문을 반환합니다.

        Raises:
            ProtocolError: 본문이 JSON이 아닌 경우
        """
        if not self.is_json:
            preview = str(self.body)[:80]
            raise ProtocolError(f"응답 본문이 JSON 형식이 아닙니다: {preview!r}")
        return self.body


class ExpectationResult(BaseModel):
    """기대값 평가 결과 모델."""

    name: str
    passed: bool
    expected: Any = None
    actual: Any = None
    detail: str | None = None


class ScenarioResult(BaseModel):
    """시나리오 실행 결과 모델.

    Attributes:
        name: 시나리오 이름
        expectations: 기대값별 평가 결과
        response: 수신한 응답. 전송 오류 시 None
        error: 전송 오류 메시지
        error_type: 오류 유형 (TransportError 등)
    """

    name: str
    expectations: list[ExpectationResult] = Field(default_factory=list)
    response: HttpResponse | None = None
    error: str | None = None
    error_type: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return self.error is None and all(e.passed for e in self.expectations)

    @property
    def failures(self) -> list[ExpectationResult]:
        return [e for e in self.expectations if not e.passed]

    def raise_for_failure(self) -> None:
        """시나리오가 실패한 경우 예외를 발생시킵니다.

        Raises:
            TransportError: 응답을 받지 못한 경우
            AssertionFailure: 첫 번째로 실패한 기대값
        """
        if self.error is not None:
            raise TransportError(self.error)
        for failure in self.failures:
            raise AssertionFailure(failure.name, failure.expected, failure.actual)


class RunReport(BaseModel):
    """전체 실행 보고서 모델.

    반복 실행마다 시나리오 결과 목록을 보관하며, 외부 리포터가
    JSON으로 소비할 수 있도록 집계값을 함께 직렬화합니다.
    """

    endpoint: str
    iterations: list[list[ScenarioResult]] = Field(default_factory=list)
    started_at: datetime
    finished_at: datetime | None = None

    @property
    def results(self) -> list[ScenarioResult]:
        return [result for iteration in self.iterations for result in iteration]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return bool(self.iterations) and all(result.passed for result in self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def request_count(self) -> int:
        return len(self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_rate(self) -> float:
        """전송 오류 또는 200이 아닌 응답의 비율."""
        results = self.results
        if not results:
            return 0.0
        failed = sum(
            1 for r in results if r.response is None or r.response.status_code != 200  # noqa: PLR2004
        )
        return failed / len(results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def p95_latency_ms(self) -> float:
        latencies = [r.response.elapsed_ms for r in self.results if r.response is not None]
        return percentile(latencies, 95)
