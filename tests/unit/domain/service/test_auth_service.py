"""Unit tests for AuthService credential resolution."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from dishka import AsyncContainer

from depot.adapter.github import MockGitHubOAuthClient
from depot.config import AuthSettings
from depot.domain.error import UnauthenticatedError
from depot.domain.repository import AccountRepository
from depot.domain.service import (
    AccountService,
    ApiTokenService,
    AuthService,
    JWTService,
)
from depot.domain.value import SessionCredentials, TokenCredentials
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolve:
    """Tests for AuthService.resolve()."""

    @pytest.mark.asyncio
    async def test_missing_credentials(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(UnauthenticatedError) as exc_info:
            await auth_service.resolve(None)

        assert str(exc_info.value) == "must be logged in to perform that action"

    @pytest.mark.asyncio
    async def test_session_resolves_to_account(self, unit_env: AsyncContainer):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(7, "alice")

        # Act
        account_id = await auth_service.resolve(SessionCredentials(token=token))

        # Assert
        assert account_id == 7

    @pytest.mark.asyncio
    async def test_tampered_session_is_rejected(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(UnauthenticatedError):
            await auth_service.resolve(SessionCredentials(token="not.a.jwt"))

    @pytest.mark.asyncio
    async def test_expired_session_is_rejected(self, unit_env: AsyncContainer):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        settings = await unit_env.get(AuthSettings)
        expired = jwt.encode(
            {
                "account_id": 1,
                "login": "alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        # Act / Assert
        with pytest.raises(UnauthenticatedError):
            await auth_service.resolve(SessionCredentials(token=expired))

    @pytest.mark.asyncio
    async def test_api_token_resolves_to_owner(self, unit_env: AsyncContainer):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        account_service = await unit_env.get(AccountService)
        token_service = await unit_env.get(ApiTokenService)
        account = await account_service.reconcile(make_identity())
        token = await token_service.issue(account.id, "ci")

        # Act
        account_id = await auth_service.resolve(TokenCredentials(secret=token.secret))

        # Assert
        assert account_id == account.id

    @pytest.mark.asyncio
    async def test_api_token_survives_relogin(self, unit_env: AsyncContainer):
        """An API token must keep working after the owner logs in again."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        account_service = await unit_env.get(AccountService)
        token_service = await unit_env.get(ApiTokenService)
        account = await account_service.reconcile(make_identity())
        token = await token_service.issue(account.id, "ci")

        # Act
        await account_service.reconcile(
            make_identity(login="alice-new", access_token="gho_new")
        )
        account_id = await auth_service.resolve(TokenCredentials(secret=token.secret))

        # Assert
        assert account_id == account.id
        repo = await unit_env.get(AccountRepository)
        assert (await repo.find_by_id(account_id)).login.root == "alice-new"

    @pytest.mark.asyncio
    async def test_unknown_api_token_is_rejected(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(UnauthenticatedError):
            await auth_service.resolve(TokenCredentials(secret="nope"))


class TestCompleteLogin:
    """Tests for AuthService.complete_login()."""

    @pytest.mark.asyncio
    async def test_returns_provider_identity(self):
        # Arrange
        client = MockGitHubOAuthClient()
        identity = make_identity(external_id=55, login="carol")
        client.register("code-55", identity)
        settings = AuthSettings()
        jwt_service = JWTService(settings)
        service = AuthService(client, jwt_service, None)

        # Act
        result = await service.complete_login("code-55")

        # Assert
        assert result == identity
