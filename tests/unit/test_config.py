"""검증기 설정 테스트."""

import pytest
from pydantic import ValidationError

from account_contract.config import VerifierSettings, load_settings, parse_duration
from account_contract.exceptions import ConfigurationError


class TestVerifierSettings:
    """VerifierSettings 기본값 및 환경 변수 테스트."""

    def test_defaults(self):
        """기본값: 로컬 엔드포인트, 30초 타임아웃, 1회 반복."""
        settings = VerifierSettings()

        assert settings.url == "http://localhost:8080/graphql"
        assert settings.timeout == 30.0
        assert settings.iterations == 1
        assert settings.duration is None
        assert settings.max_error_rate == 0.01
        assert settings.p95_latency_ms == 500.0
        assert settings.inline_arguments is False

    def test_url_from_environment(self, monkeypatch):
        """GRAPHQL_CORE_URL 환경 변수로 엔드포인트 변경."""
        # Arrange
        monkeypatch.setenv("GRAPHQL_CORE_URL", "http://graphql-core:9000/graphql")

        # Act
        settings = VerifierSettings()

        # Assert
        assert settings.url == "http://graphql-core:9000/graphql"

    def test_tuning_parameters_from_environment(self, monkeypatch):
        monkeypatch.setenv("GRAPHQL_CORE_ITERATIONS", "10")
        monkeypatch.setenv("GRAPHQL_CORE_DURATION", "5m")
        monkeypatch.setenv("GRAPHQL_CORE_MAX_ERROR_RATE", "0.05")

        settings = VerifierSettings()

        assert settings.iterations == 10
        assert settings.duration_seconds == 300
        assert settings.max_error_rate == 0.05

    def test_explicit_value_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("GRAPHQL_CORE_URL", "http://from-env/graphql")

        settings = load_settings(url="http://explicit/graphql")

        assert settings.url == "http://explicit/graphql"

    @pytest.mark.parametrize(
        "url",
        ["", "   ", "localhost:8080/graphql", "ftp://example.com/graphql", "http://"],
    )
    def test_invalid_url_rejected(self, url):
        """http(s) 스킴과 호스트가 없는 URL은 거부."""
        with pytest.raises(ValidationError):
            VerifierSettings(url=url)

    def test_https_url_accepted(self):
        settings = VerifierSettings(url="https://api.example.com/graphql")
        assert settings.url == "https://api.example.com/graphql"

    def test_invalid_duration_rejected(self):
        with pytest.raises(ValidationError):
            VerifierSettings(duration="soon")

    def test_duration_seconds_unset(self):
        assert VerifierSettings().duration_seconds is None


class TestLoadSettings:
    """load_settings 오류 변환 테스트."""

    def test_none_values_are_ignored(self):
        """None 값은 기본값을 덮어쓰지 않음."""
        settings = load_settings(url=None, iterations=None, timeout=None)

        assert settings.url == "http://localhost:8080/graphql"
        assert settings.iterations == 1

    def test_missing_endpoint_fails_fast(self, monkeypatch):
        """빈 엔드포인트는 ConfigurationError."""
        monkeypatch.setenv("GRAPHQL_CORE_URL", "")

        with pytest.raises(ConfigurationError, match="url"):
            load_settings()

    def test_zero_iterations_rejected(self):
        with pytest.raises(ConfigurationError, match="iterations"):
            load_settings(iterations=0)

    def test_negative_timeout_rejected(self):
        with pytest.raises(ConfigurationError, match="timeout"):
            load_settings(timeout=-1)

    def test_error_rate_out_of_range_rejected(self):
        with pytest.raises(ConfigurationError, match="max_error_rate"):
            load_settings(max_error_rate=1.5)


class TestParseDuration:
    """실행 시간 파싱 테스트."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("30s", 30),
            ("5m", 300),
            ("1h", 3600),
            ("1h30m", 5400),
            ("2m15s", 135),
            ("45", 45),
            (" 10S ", 10),
        ],
    )
    def test_valid_durations(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "5 minutes", "1.5m", "0s", "0", "m5"])
    def test_invalid_durations(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)
