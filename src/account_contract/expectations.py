"""Declarative expectations over normalised HTTP responses.

An expectation never raises: a non-JSON body or a missing path scores as a
failed result carrying the expected and actual values.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from account_contract.exceptions import ProtocolError
from account_contract.models import ExpectationResult, HttpResponse


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()

Path = tuple[str | int, ...]


def dig(body: Any, path: Path) -> Any:
    """Walk dict keys / list indexes; return MISSING when any step is absent."""
    current = body
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return MISSING
            current = current[step]
        else:
            if not isinstance(current, dict) or step not in current:
                return MISSING
            current = current[step]
    return current


def format_path(path: Path) -> str:
    text = ""
    for step in path:
        text += f"[{step}]" if isinstance(step, int) else (f".{step}" if text else step)
    return text


ERROR_MESSAGE_PATH: Path = ("errors", 0, "message")


@dataclass(frozen=True)
class Expectation:
    """A named predicate over an HttpResponse.

    ``check`` returns ``(passed, actual)``; it may raise ProtocolError when it
    needs a JSON body that is not there.
    """

    name: str
    expected: Any
    check: Callable[[HttpResponse], tuple[bool, Any]]

    def evaluate(self, response: HttpResponse) -> ExpectationResult:
        try:
            passed, actual = self.check(response)
        except ProtocolError as e:
            return ExpectationResult(
                name=self.name,
                passed=False,
                expected=self.expected,
                actual=None,
                detail=e.message,
            )

        detail = None
        if not passed:
            detail = f"expected {self.expected!r}, got {actual!r}"
            service_error = dig(response.body, ERROR_MESSAGE_PATH) if response.is_json else MISSING
            if service_error is not MISSING and service_error != actual:
                detail += f" (service error: {service_error!r})"
        return ExpectationResult(
            name=self.name,
            passed=passed,
            expected=self.expected,
            actual=None if actual is MISSING else actual,
            detail=detail,
        )


def evaluate(expectations: Iterable[Expectation], response: HttpResponse) -> list[ExpectationResult]:
    return [expectation.evaluate(response) for expectation in expectations]


# ===== Factories =====


def status_is(status_code: int = 200) -> Expectation:
    return Expectation(
        name=f"is status {status_code}",
        expected=status_code,
        check=lambda r: (r.status_code == status_code, r.status_code),
    )


def body_is_json() -> Expectation:
    return Expectation(
        name="body is json",
        expected=True,
        check=lambda r: (r.is_json, r.is_json),
    )


def field_equals(name: str, path: Path, expected: Any) -> Expectation:
    """Equality check on a JSON path."""

    def check(response: HttpResponse) -> tuple[bool, Any]:
        actual = dig(response.json_body(), path)
        return actual is not MISSING and actual == expected, actual

    return Expectation(name=name, expected=expected, check=check)


def field_present(name: str, path: Path) -> Expectation:
    """The value at ``path`` exists and is neither null nor an empty string."""

    def check(response: HttpResponse) -> tuple[bool, Any]:
        actual = dig(response.json_body(), path)
        return actual is not MISSING and actual is not None and actual != "", actual

    return Expectation(name=name, expected=f"non-empty {format_path(path)}", check=check)


def field_truthy(name: str, path: Path) -> Expectation:
    def check(response: HttpResponse) -> tuple[bool, Any]:
        actual = dig(response.json_body(), path)
        return actual is not MISSING and bool(actual), actual

    return Expectation(name=name, expected=f"truthy {format_path(path)}", check=check)


def error_message_is(name: str, message: str) -> Expectation:
    """errors[0].message must equal ``message`` exactly."""
    return field_equals(name, ERROR_MESSAGE_PATH, message)
