"""End-to-end tests for the GitHub login flow and sessions."""

import pytest

from depot.adapter.github import GitHubOAuthClient
from depot.domain.service import ApiTokenService
from depot.interface.api.credentials import SESSION_COOKIE
from tests.conftest import make_identity


class TestAuthorizeUrl:
    @pytest.mark.asyncio
    async def test_returns_url_with_state_and_sets_cookie(self, client):
        # Act
        response = await client.get("/authorize_url")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert f"state={data['state']}" in data["url"]
        assert client.cookies.get("oauth_state") == data["state"]


class TestAuthorize:
    @pytest.mark.asyncio
    async def test_without_state_is_rejected(self, client):
        response = await client.get("/authorize")

        assert response.status_code == 400
        assert response.json() == {
            "errors": [{"detail": "invalid state parameter"}]
        }

    @pytest.mark.asyncio
    async def test_forged_state_is_rejected(self, client):
        # Arrange
        await client.get("/authorize_url")

        # Act
        response = await client.get(
            "/authorize", params={"code": "c", "state": "forged"}
        )

        # Assert
        assert response.status_code == 400
        assert SESSION_COOKIE not in client.cookies

    @pytest.mark.asyncio
    async def test_login_sets_session_and_returns_private_view(self, client, login):
        # Act
        user = await login(make_identity())

        # Assert
        assert user["login"] == "alice"
        assert user["email"] == "alice@example.com"
        assert user["url"] == "https://github.com/alice"
        assert client.cookies.get(SESSION_COOKIE)

    @pytest.mark.asyncio
    async def test_rejected_code_is_bad_gateway(self, app, client):
        # Arrange
        github = await app.state.dishka_container.get(GitHubOAuthClient)
        github.reject("expired")
        state = (await client.get("/authorize_url")).json()["state"]

        # Act
        response = await client.get(
            "/authorize", params={"code": "expired", "state": state}
        )

        # Assert
        assert response.status_code == 502


class TestMe:
    @pytest.mark.asyncio
    async def test_requires_login(self, client):
        response = await client.get("/me")

        assert response.status_code == 403
        assert response.json() == {
            "errors": [{"detail": "must be logged in to perform that action"}]
        }

    @pytest.mark.asyncio
    async def test_returns_own_account_with_email(self, client, login):
        await login(make_identity())

        response = await client.get("/me")

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "alice@example.com"

    @pytest.mark.asyncio
    async def test_logout_ends_session(self, client, login):
        # Arrange
        await login(make_identity())

        # Act
        logout = await client.post("/logout")
        response = await client.get("/me")

        # Assert
        assert logout.json() == {"ok": True}
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_api_token_header_authenticates(self, app, client, login):
        # Arrange
        user = await login(make_identity())
        await client.post("/logout")
        async with app.state.dishka_container() as request_container:
            token_service = await request_container.get(ApiTokenService)
            token = await token_service.issue(user["id"], "ci")

        # Act
        response = await client.get(
            "/me", headers={"Authorization": f"Bearer {token.secret}"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user"]["id"] == user["id"]
        assert response.json()["api_tokens"][0]["name"] == "ci"
        assert "secret" not in response.json()["api_tokens"][0]

    @pytest.mark.asyncio
    async def test_relogin_keeps_account_and_edited_email(self, client, login):
        # Arrange
        first = await login(make_identity())
        await client.put(
            f"/users/{first['id']}", json={"user": {"email": "mine@example.com"}}
        )

        # Act
        second = await login(
            make_identity(
                login="alice-renamed",
                email="github@example.com",
                access_token="gho_second",
            )
        )

        # Assert
        assert second["id"] == first["id"]
        assert second["login"] == "alice-renamed"
        assert second["email"] == "mine@example.com"


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_format(self, client):
        response = await client.get("/no/such/route")

        assert response.status_code == 404
        assert response.json() == {"errors": [{"detail": "Not Found"}]}
