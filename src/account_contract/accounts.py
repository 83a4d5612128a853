"""Test account generation."""

import random
import string
from datetime import UTC, datetime

from account_contract.models import AccountInput

DEFAULT_NAME = "test"
DEFAULT_PASSWORD = "1234566"


def generate_random_email() -> str:
    """Generate a unique email for a contract run."""
    random_str = "".join(random.choices(string.ascii_lowercase + string.digits, k=8))
    return f"contract_{random_str}@example.com"


def generate_birthday() -> str:
    """Current UTC time as an ISO-8601 timestamp with a Z suffix."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def generate_account(
    email: str | None = None,
    name: str | None = None,
    password: str | None = None,
    birthday: str | None = None,
) -> AccountInput:
    """Build a valid AccountInput, filling unset fields with fresh values.

    Only None counts as unset; an explicit empty string is validated as given.

    Raises:
        pydantic.ValidationError: if an explicit value is invalid
    """
    return AccountInput(
        email=email if email is not None else generate_random_email(),
        name=name if name is not None else DEFAULT_NAME,
        password=password if password is not None else DEFAULT_PASSWORD,
        birthday=birthday if birthday is not None else generate_birthday(),
    )
