"""Unit tests for LoginUseCase."""

import pytest
from dishka import AsyncContainer

from depot.adapter.github import GitHubOAuthClient, GitHubOAuthError
from depot.application.usecase.auth import LoginUseCase
from depot.application.usecase.auth.login import LoginRequest
from depot.domain.error import InvalidInputError
from depot.domain.service import JWTService
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLoginUseCase:
    """Unit tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_first_login_creates_account(self, unit_env: AsyncContainer):
        """Should reconcile the GitHub identity and sign a session token."""
        # Arrange
        github = await unit_env.get(GitHubOAuthClient)
        github.register("code-1", make_identity())
        login_use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        result = await login_use_case.execute(
            LoginRequest(code="code-1", state="s1", expected_state="s1")
        )

        # Assert
        assert result.user.login == "alice"
        assert result.user.email == "alice@example.com"
        assert result.user.url == "https://github.com/alice"
        payload = jwt_service.verify_token(result.token)
        assert payload.account_id == result.user.id
        assert payload.login == "alice"

    @pytest.mark.asyncio
    async def test_repeat_login_keeps_account_id(self, unit_env: AsyncContainer):
        # Arrange
        github = await unit_env.get(GitHubOAuthClient)
        github.register("code-1", make_identity())
        github.register("code-2", make_identity(login="alice2", access_token="t2"))
        login_use_case = await unit_env.get(LoginUseCase)

        # Act
        first = await login_use_case.execute(
            LoginRequest(code="code-1", state="s", expected_state="s")
        )
        second = await login_use_case.execute(
            LoginRequest(code="code-2", state="s", expected_state="s")
        )

        # Assert
        assert second.user.id == first.user.id
        assert second.user.login == "alice2"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "state, expected_state",
        [("returned", "issued"), ("returned", None), ("", "")],
    )
    async def test_state_mismatch_is_rejected(
        self, unit_env: AsyncContainer, state, expected_state
    ):
        """Should refuse the callback before talking to GitHub."""
        # Arrange
        github = await unit_env.get(GitHubOAuthClient)
        github.reject("code-1")  # would raise GitHubOAuthError if exchanged
        login_use_case = await unit_env.get(LoginUseCase)

        # Act
        with pytest.raises(InvalidInputError) as exc_info:
            await login_use_case.execute(
                LoginRequest(code="code-1", state=state, expected_state=expected_state)
            )

        # Assert
        assert str(exc_info.value) == "invalid state parameter"

    @pytest.mark.asyncio
    async def test_rejected_code_propagates(self, unit_env: AsyncContainer):
        github = await unit_env.get(GitHubOAuthClient)
        github.reject("bad")
        login_use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(GitHubOAuthError):
            await login_use_case.execute(
                LoginRequest(code="bad", state="s", expected_state="s")
            )
