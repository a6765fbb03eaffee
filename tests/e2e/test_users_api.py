"""End-to-end tests for user profile, email edit and stats routes."""

import pytest

from depot.domain.repository import PackageRepository
from tests.conftest import make_identity


class TestUserProfile:
    @pytest.mark.asyncio
    async def test_public_profile_omits_email(self, client, login):
        # Arrange
        await login(make_identity())
        await client.post("/logout")

        # Act
        response = await client.get("/users/alice")

        # Assert
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["login"] == "alice"
        assert user["email"] is None
        assert user["url"] == "https://github.com/alice"

    @pytest.mark.asyncio
    async def test_owner_still_gets_public_view_by_login(self, client, login):
        await login(make_identity())

        response = await client.get("/users/alice")

        assert response.json()["user"]["email"] is None

    @pytest.mark.asyncio
    async def test_unknown_login(self, client):
        response = await client.get("/users/nobody")

        assert response.status_code == 404


class TestUpdateEmail:
    @pytest.mark.asyncio
    async def test_owner_can_update(self, client, login):
        # Arrange
        user = await login(make_identity())

        # Act
        response = await client.put(
            f"/users/{user['id']}", json={"user": {"email": "new@example.com"}}
        )
        me = await client.get("/me")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert me.json()["user"]["email"] == "new@example.com"

    @pytest.mark.asyncio
    async def test_other_account_is_forbidden(self, client, login):
        # Arrange
        bob = await login(make_identity(external_id=2, login="bob"))
        await login(make_identity(external_id=1, login="alice"))

        # Act
        response = await client.put(
            f"/users/{bob['id']}", json={"user": {"email": "x@example.com"}}
        )

        # Assert
        assert response.status_code == 403
        assert response.json() == {
            "errors": [{"detail": "current user does not match requested user"}]
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", [None, "", "  "])
    async def test_blank_email_is_rejected(self, client, login, email):
        user = await login(make_identity())

        response = await client.put(
            f"/users/{user['id']}", json={"user": {"email": email}}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"detail": "empty email rejected"}]}

    @pytest.mark.asyncio
    async def test_malformed_body_is_bad_request(self, client, login):
        user = await login(make_identity())

        response = await client.put(f"/users/{user['id']}", json={"email": "x"})

        assert response.status_code == 400
        assert "errors" in response.json()

    @pytest.mark.asyncio
    async def test_requires_login(self, client):
        response = await client.put("/users/1", json={"user": {"email": "x@y.z"}})

        assert response.status_code == 403


class TestStats:
    @pytest.mark.asyncio
    async def test_total_downloads(self, app, client, login):
        # Arrange
        user = await login(make_identity())
        packages = await app.state.dishka_container.get(PackageRepository)
        serde = await packages.create("serde", download_count=7)
        tokio = await packages.create("tokio", download_count=3)
        await packages.add_owner(serde.id, user["id"])
        await packages.add_owner(tokio.id, user["id"])

        # Act
        stats = await client.get(f"/users/{user['id']}/stats")
        owned = await client.get(f"/users/{user['id']}/packages")

        # Assert
        assert stats.json() == {"total_downloads": 10}
        assert [p["name"] for p in owned.json()["packages"]] == ["serde", "tokio"]

    @pytest.mark.asyncio
    async def test_account_without_packages(self, client, login):
        user = await login(make_identity())

        response = await client.get(f"/users/{user['id']}/stats")

        assert response.json() == {"total_downloads": 0}

    @pytest.mark.asyncio
    async def test_unknown_account(self, client):
        response = await client.get("/users/999/stats")

        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["stats", "packages"])
    async def test_account_id_beyond_integer_range(self, client, path):
        response = await client.get(f"/users/3000000000/{path}")

        assert response.status_code == 404
