"""Contract constants shared by the verifier, the CLI and the load scenarios.

Error messages are compared verbatim against the account service responses,
including the embedded double quotes.
"""

from enum import StrEnum

# ===== Endpoint =====


class Endpoint:
    """Account service endpoint defaults."""

    DEFAULT_URL = "http://localhost:8080/graphql"
    """GraphQL endpoint used when GRAPHQL_CORE_URL is not set"""

    CONTENT_TYPE = "application/json"

    REQUEST_TIMEOUT_SECONDS = 30.0
    """Per-request timeout surfaced as a TransportError"""


# ===== Logging =====


class LogContext:
    """Fields attached to or scrubbed from every log entry."""

    APP_NAME = "account-contract"

    SENSITIVE_KEY_PARTS = frozenset({"password", "token", "secret", "api_key"})
    """A key containing any of these parts is masked (e.g. account_password)"""

    MASK = "***MASKED***"


# ===== Service error messages =====


class ServiceMessage:
    """Error messages returned by the account service in errors[0].message."""

    INVALID_CREDENTIALS = "Invalid Credentials"
    """Returned when the email is already registered"""

    INVALID_EMAIL = 'Invalid Argument: "invalid email"'
    """Returned when the email fails the service-side format check"""


# ===== Scenarios =====


class ScenarioName(StrEnum):
    """Scenario identifiers, in execution order."""

    HAPPY_PATH = "happy_path"
    DUPLICATE = "duplicate"
    INVALID_EMAIL = "invalid_email"


MALFORMED_EMAIL = "invalidtest"
"""Email sent by the invalid-email scenario"""


# ===== Load thresholds =====


class Thresholds:
    """Run-level pass/fail gates."""

    MAX_ERROR_RATE = 0.01  # 1%
    """Maximum fraction of failed requests"""

    P95_LATENCY_MS = 500.0
    """Maximum 95th-percentile request latency in milliseconds"""


# ===== Exit codes =====


class ExitCode:
    """CLI process exit codes."""

    OK = 0
    FAILED = 1
    CONFIGURATION_ERROR = 2
