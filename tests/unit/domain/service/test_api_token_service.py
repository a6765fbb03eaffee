"""Unit tests for ApiTokenService."""

import pytest

from depot.config import AuthSettings
from depot.domain.error import UnauthenticatedError
from depot.domain.service import AccountService, ApiTokenService
from depot.domain.value import AccountId
from depot.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryApiTokenRepository,
)
from tests.conftest import make_identity


@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def token_repo() -> InMemoryApiTokenRepository:
    return InMemoryApiTokenRepository()


@pytest.fixture
def service(account_repo, token_repo) -> ApiTokenService:
    return ApiTokenService(token_repo, account_repo, AuthSettings())


class TestAuthenticate:
    """Tests for ApiTokenService.authenticate()."""

    @pytest.mark.asyncio
    async def test_resolves_owner(self, service, account_repo):
        """Should return the account that owns the token."""
        # Arrange
        account = await account_repo.insert(make_identity())
        token = await service.issue(account.id, "ci")

        # Act
        resolved = await service.authenticate(token.secret)

        # Assert
        assert resolved.id == account.id

    @pytest.mark.asyncio
    async def test_survives_reconcile(self, service, account_repo):
        """Relogin with a new login and provider token should not break the API token."""
        # Arrange
        account = await account_repo.insert(make_identity())
        token = await service.issue(account.id, "ci")
        await AccountService(account_repo).reconcile(
            make_identity(login="alice-renamed", access_token="gho_rotated")
        )

        # Act
        resolved = await service.authenticate(token.secret)

        # Assert
        assert resolved.id == account.id
        assert resolved.login.root == "alice-renamed"

    @pytest.mark.asyncio
    async def test_unknown_secret_is_rejected(self, service):
        with pytest.raises(UnauthenticatedError):
            await service.authenticate("not-a-real-token")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("secret", ["", "   "])
    async def test_blank_secret_is_rejected(self, service, secret):
        with pytest.raises(UnauthenticatedError):
            await service.authenticate(secret)

    @pytest.mark.asyncio
    async def test_dangling_token_is_fatal(self, service, token_repo):
        """A token pointing at a missing account means storage is corrupt."""
        # Arrange
        await token_repo.insert(AccountId(999), "orphan", "orphan-secret")

        # Act / Assert
        with pytest.raises(RuntimeError):
            await service.authenticate("orphan-secret")


class TestIssue:
    """Tests for ApiTokenService.issue() and list_for_account()."""

    @pytest.mark.asyncio
    async def test_issued_secrets_are_unique_and_long(self, service, account_repo):
        # Arrange
        account = await account_repo.insert(make_identity())

        # Act
        first = await service.issue(account.id, "laptop")
        second = await service.issue(account.id, "ci")

        # Assert
        assert first.secret != second.secret
        # token_urlsafe(32) yields 43 characters
        assert len(first.secret) >= 43

    @pytest.mark.asyncio
    async def test_list_for_account_returns_only_own_tokens(
        self, service, account_repo
    ):
        # Arrange
        alice = await account_repo.insert(make_identity(external_id=1, login="alice"))
        bob = await account_repo.insert(make_identity(external_id=2, login="bob"))
        await service.issue(alice.id, "laptop")
        await service.issue(alice.id, "ci")
        await service.issue(bob.id, "bob-ci")

        # Act
        tokens = await service.list_for_account(alice.id)

        # Assert
        assert [t.name for t in tokens] == ["laptop", "ci"]
