"""pytest fixtures."""

import json
import re
import uuid
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from account_contract.client import GraphQLClient
from account_contract.config import VerifierSettings
from account_contract.constants import ServiceMessage
from account_contract.models import AccountInput
from account_contract.verifier import ContractVerifier

TEST_URL = "http://testserver/graphql"

# name: "value" pairs of an inline createAccount mutation
_INLINE_ARGUMENT_RE = re.compile(r'(\w+): ("(?:[^"\\]|\\.)*")')


def _inline_user(query: str) -> dict[str, str]:
    return {name: json.loads(literal) for name, literal in _INLINE_ARGUMENT_RE.findall(query)}


def create_fake_account_service() -> FastAPI:
    """In-memory stand-in for the account service GraphQL endpoint.

    Mirrors the service contract: unique emails, an "@" check on the email,
    errors reported with HTTP 200 under errors[0].message.
    """
    app = FastAPI()
    app.state.accounts = {}
    app.state.requests = []
    app.state.duplicate_message = ServiceMessage.INVALID_CREDENTIALS

    def error(message: str) -> dict[str, Any]:
        return {
            "data": None,
            "errors": [{"message": message, "locations": [], "path": ["createAccount"]}],
        }

    @app.post("/graphql")
    async def graphql(payload: dict[str, Any]) -> dict[str, Any]:
        app.state.requests.append(payload)
        variables = payload.get("variables") or {}
        user = variables.get("user") or _inline_user(payload.get("query", ""))

        email = user.get("email", "")
        if "@" not in email:
            return error(ServiceMessage.INVALID_EMAIL)
        if email in app.state.accounts:
            return error(app.state.duplicate_message)

        account = {
            "id": str(uuid.uuid4()),
            "name": user["name"],
            "active": True,
            "birthday": user["birthday"],
        }
        app.state.accounts[email] = account
        return {"data": {"createAccount": account}}

    return app


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GRAPHQL_CORE_* variables from the host out of the tests."""
    for name in (
        "GRAPHQL_CORE_URL",
        "GRAPHQL_CORE_TIMEOUT",
        "GRAPHQL_CORE_ITERATIONS",
        "GRAPHQL_CORE_DURATION",
        "GRAPHQL_CORE_MAX_ERROR_RATE",
        "GRAPHQL_CORE_P95_LATENCY_MS",
        "GRAPHQL_CORE_INLINE_ARGUMENTS",
        "GRAPHQL_CORE_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_service() -> FastAPI:
    """Fresh fake account service (empty account store)."""
    return create_fake_account_service()


@pytest.fixture
def settings() -> VerifierSettings:
    return VerifierSettings(url=TEST_URL)


@pytest.fixture
def account() -> AccountInput:
    """Valid account input for the happy path."""
    return AccountInput(
        email="test@gmail.com",
        name="test",
        password="1234566",
        birthday="2023-12-29T14:57:11.873961Z",
    )


@pytest_asyncio.fixture
async def graphql_client(fake_service: FastAPI) -> AsyncGenerator[GraphQLClient, None]:
    """GraphQL client wired to the fake service through ASGITransport."""
    client = GraphQLClient(TEST_URL, transport=httpx.ASGITransport(app=fake_service))
    yield client
    await client.close()


@pytest_asyncio.fixture
async def verifier(
    settings: VerifierSettings, graphql_client: GraphQLClient
) -> AsyncGenerator[ContractVerifier, None]:
    async with ContractVerifier(settings, client=graphql_client) as contract_verifier:
        yield contract_verifier
