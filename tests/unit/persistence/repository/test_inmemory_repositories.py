"""Unit tests for in-memory repositories.

The in-memory repositories back every unit and e2e test, so they must
honour the same uniqueness and ordering rules as the Postgres tables.
"""

from datetime import timedelta

import pytest

from depot.domain.error import ConflictError
from depot.domain.value import AccountId, Login
from depot.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryApiTokenRepository,
    InMemoryFollowRepository,
    InMemoryPackageRepository,
    InMemoryVersionRepository,
)
from tests.conftest import make_identity


class TestInMemoryAccountRepository:
    @pytest.mark.asyncio
    async def test_duplicate_external_id_conflicts(self):
        repo = InMemoryAccountRepository()
        await repo.insert(make_identity())

        with pytest.raises(ConflictError):
            await repo.insert(make_identity(login="someone-else"))

    @pytest.mark.asyncio
    async def test_update_provider_fields_for_unknown_identity(self):
        repo = InMemoryAccountRepository()

        assert await repo.update_provider_fields(make_identity()) is None

    @pytest.mark.asyncio
    async def test_update_email_leaves_provider_fields(self):
        # Arrange
        repo = InMemoryAccountRepository()
        account = await repo.insert(make_identity())

        # Act
        updated = await repo.update_email(account.id, "x@example.com")

        # Assert
        assert updated.email == "x@example.com"
        assert updated.login == Login("alice")
        assert updated.access_token == "gho_first"

    @pytest.mark.asyncio
    async def test_update_email_unknown_account(self):
        repo = InMemoryAccountRepository()

        assert await repo.update_email(AccountId(99), "x@example.com") is None


class TestInMemoryApiTokenRepository:
    @pytest.mark.asyncio
    async def test_duplicate_secret_conflicts(self):
        repo = InMemoryApiTokenRepository()
        await repo.insert(AccountId(1), "a", "same")

        with pytest.raises(ConflictError):
            await repo.insert(AccountId(2), "b", "same")

    @pytest.mark.asyncio
    async def test_find_by_secret_is_exact(self):
        repo = InMemoryApiTokenRepository()
        await repo.insert(AccountId(1), "a", "Secret")

        assert await repo.find_by_secret("secret") is None
        assert (await repo.find_by_secret("Secret")).account_id == 1


class TestInMemoryFollowRepository:
    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_row_existed(self):
        repo = InMemoryFollowRepository()
        await repo.insert(AccountId(1), 5)

        assert await repo.delete(AccountId(1), 5) is True
        assert await repo.delete(AccountId(1), 5) is False


class TestInMemoryPackageRepository:
    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self):
        repo = InMemoryPackageRepository()
        await repo.create("serde")

        with pytest.raises(ConflictError):
            await repo.create("serde")

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_missing(self):
        repo = InMemoryPackageRepository()
        serde = await repo.create("serde")

        found = await repo.find_by_ids([serde.id, 404])

        assert [p.name for p in found] == ["serde"]

    @pytest.mark.asyncio
    async def test_add_owner_is_idempotent(self):
        # Arrange
        repo = InMemoryPackageRepository()
        serde = await repo.create("serde", download_count=3)

        # Act
        await repo.add_owner(serde.id, AccountId(1))
        await repo.add_owner(serde.id, AccountId(1))

        # Assert
        assert await repo.sum_downloads_by_owner(AccountId(1)) == 3


class TestInMemoryVersionRepository:
    @pytest.mark.asyncio
    async def test_duplicate_number_conflicts(self):
        repo = InMemoryVersionRepository()
        await repo.create(1, "1.0.0")

        with pytest.raises(ConflictError):
            await repo.create(1, "1.0.0")

    @pytest.mark.asyncio
    async def test_same_number_in_other_package_is_fine(self):
        repo = InMemoryVersionRepository()
        await repo.create(1, "1.0.0")

        version = await repo.create(2, "1.0.0")

        assert version.package_id == 2

    @pytest.mark.asyncio
    async def test_orders_by_created_at_then_id(self, t0):
        # Arrange
        repo = InMemoryVersionRepository()
        old = await repo.create(1, "0.1.0", created_at=t0)
        tie_a = await repo.create(1, "0.2.0", created_at=t0 + timedelta(days=1))
        tie_b = await repo.create(1, "0.2.1", created_at=t0 + timedelta(days=1))

        # Act
        rows = await repo.find_by_package_ids({1}, limit=10)

        # Assert
        assert [v.id for v in rows] == [tie_b.id, tie_a.id, old.id]
