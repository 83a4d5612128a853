"""계약 검증기 설정 모듈.

환경 변수를 통해 검증 대상 엔드포인트와 부하 실행 파라미터를 관리합니다.
모든 환경 변수는 GRAPHQL_CORE_ 접두사를 사용합니다 (예: GRAPHQL_CORE_URL).
"""

import re
from typing import Any, Literal
from urllib.parse import urlsplit

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from account_contract.constants import Endpoint, Thresholds
from account_contract.exceptions import ConfigurationError

_DURATION_RE = re.compile(r"^(?:\d+[hms])+$")
_DURATION_PART_RE = re.compile(r"(\d+)([hms])")
_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}


def parse_duration(value: str) -> int:
    """실행 시간 문자열을 초 단위로 변환합니다.

    Locust의 --run-time 형식(30s, 5m, 1h30m)과 단위 없는 정수(초)를 허용합니다.

    Args:
        value: 실행 시간 문자열

    Returns:
        초 단위 실행 시간

    Raises:
        ValueError: 형식이 잘못되었거나 0초인 경우
    """
    text = value.strip().lower()
    if text.isdigit():
        seconds = int(text)
    elif _DURATION_RE.match(text):
        seconds = sum(
            int(amount) * _UNIT_SECONDS[unit] for amount, unit in _DURATION_PART_RE.findall(text)
        )
    else:
        raise ValueError(f"Invalid duration: {value!r} (expected e.g. 30s, 5m, 1h30m)")

    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return seconds


class VerifierSettings(BaseSettings):
    """계약 검증기 설정 클래스.

    Attributes:
        url: 계정 서비스 GraphQL 엔드포인트 URL
        timeout: 요청 타임아웃 (초 단위, 기본값: 30.0)
        iterations: 전체 시나리오 반복 횟수 (기본값: 1)
        duration: 부하 실행 시간 (예: 30s, 5m). 미설정 시 반복 횟수만 적용
        max_error_rate: 허용 요청 실패율 (기본값: 0.01)
        p95_latency_ms: 허용 95 백분위 지연 시간 (밀리초, 기본값: 500)
        inline_arguments: 변수 대신 쿼리 본문에 인자를 직접 넣을지 여부
        log_format: 로그 출력 형식 (console 또는 json)

    Example:
        >>> settings = VerifierSettings(url="http://graphql-core:8080/graphql")
        >>> settings.iterations
        1
    """

    url: str = Field(default=Endpoint.DEFAULT_URL, description="GraphQL endpoint URL")
    timeout: float = Field(default=Endpoint.REQUEST_TIMEOUT_SECONDS, gt=0)
    iterations: int = Field(default=1, ge=1)
    duration: str | None = Field(default=None, description="Run duration (30s, 5m, 1h30m)")
    max_error_rate: float = Field(default=Thresholds.MAX_ERROR_RATE, ge=0, le=1)
    p95_latency_ms: float = Field(default=Thresholds.P95_LATENCY_MS, gt=0)
    inline_arguments: bool = False
    log_format: Literal["console", "json"] = "console"

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """엔드포인트 URL 검증 (http/https 스킴과 호스트 필수)"""
        if not v or not v.strip():
            raise ValueError("Endpoint URL is required. Set GRAPHQL_CORE_URL")
        parts = urlsplit(v.strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"Endpoint URL must be an absolute http(s) URL: {v!r}")
        return v.strip()

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: str | None) -> str | None:
        if v is not None:
            parse_duration(v)
        return v

    @property
    def duration_seconds(self) -> int | None:
        """실행 시간을 초 단위로 반환합니다. 미설정 시 None."""
        if self.duration is None:
            return None
        return parse_duration(self.duration)


def load_settings(**overrides: Any) -> VerifierSettings:
    """환경 변수와 명시적 값으로 설정을 로드합니다.

    None 값은 무시되어 환경 변수 또는 기본값이 사용됩니다.

    Args:
        **overrides: 환경 변수보다 우선하는 설정값

    Returns:
        검증된 설정 객체

    Raises:
        ConfigurationError: 설정값이 유효하지 않은 경우
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return VerifierSettings(**values)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid verifier settings: {errors}") from e
