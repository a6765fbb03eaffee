"""Fixtures for end-to-end API tests."""

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from depot.adapter.github import GitHubOAuthClient
from depot.domain.value import ProviderIdentity
from tests.harness import create_test_app


@pytest.fixture
def app() -> FastAPI:
    """API wired to mock GitHub and in-memory storage."""
    return create_test_app()


@pytest_asyncio.fixture
async def client(app: FastAPI):
    """HTTP client that keeps cookies between requests, like a browser."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client
    await app.state.dishka_container.close()


@pytest.fixture
def login(app: FastAPI, client: httpx.AsyncClient):
    """Log ``client`` in as the given GitHub identity through the real flow.

    Returns the private user view from ``/authorize``.
    """

    async def _login(identity: ProviderIdentity) -> dict:
        github = await app.state.dishka_container.get(GitHubOAuthClient)
        code = f"code-{identity.external_id}-{identity.access_token}"
        github.register(code, identity)

        start = await client.get("/authorize_url")
        state = start.json()["state"]
        response = await client.get(
            "/authorize", params={"code": code, "state": state}
        )
        assert response.status_code == 200, response.text
        return response.json()["user"]

    return _login
