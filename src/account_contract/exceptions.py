"""계약 검증기 예외 클래스 모듈.

계정 생성 계약 검증 과정에서 발생할 수 있는 예외를 정의합니다.
설정 오류만 실행을 중단시키며, 나머지 예외는 시나리오 결과로 기록됩니다.
"""

from typing import Any


class ContractError(Exception):
    """계약 검증기 기본 예외 클래스.

    모든 계약 검증기 예외의 부모 클래스입니다.

    Attributes:
        message: 오류 메시지
    """

    def __init__(self, message: str = "계약 검증 중 오류가 발생했습니다") -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(ContractError):
    """설정 오류 예외.

    엔드포인트가 없거나 형식이 잘못된 경우 등, 요청을 보내기 전에
    실행을 중단해야 하는 경우 발생합니다.
    """

    def __init__(self, message: str = "검증기 설정이 올바르지 않습니다") -> None:
        super().__init__(message=message)


class TransportError(ContractError):
    """전송 오류 예외.

    연결 거부, 타임아웃, DNS 실패 등으로 응답을 받지 못한 경우 발생합니다.
    """

    def __init__(self, message: str = "엔드포인트에 연결할 수 없습니다") -> None:
        super().__init__(message=message)


class ProtocolError(ContractError):
    """프로토콜 오류 예외.

    응답 본문을 JSON으로 해석할 수 없는 경우 발생합니다.
    """

    def __init__(self, message: str = "응답 본문이 JSON 형식이 아닙니다") -> None:
        super().__init__(message=message)


class AssertionFailure(ContractError):
    """기대값 불일치 예외.

    응답이 기대값과 일치하지 않을 때 기대값과 실제값을 함께 전달합니다.

    Attributes:
        expectation: 실패한 기대값 이름
        expected: 기대값
        actual: 실제값
    """

    def __init__(self, expectation: str, expected: Any, actual: Any) -> None:
        self.expectation = expectation
        self.expected = expected
        self.actual = actual
        super().__init__(
            message=f"{expectation}: expected {expected!r}, got {actual!r}"
        )
