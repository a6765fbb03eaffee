"""PostgreSQL implementation of Follow repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from depot.domain.repository import FollowRepository
from depot.domain.value import AccountId, PackageId
from depot.persistence.repository.base import PostgresRepository
from depot.persistence.tables import follows_table


class PostgresFollowRepository(PostgresRepository, FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    async def insert(self, account_id: AccountId, package_id: PackageId) -> None:
        """Insert a follow, doing nothing if it already exists."""
        stmt = (
            insert(follows_table)
            .values(account_id=account_id, package_id=package_id)
            .on_conflict_do_nothing(index_elements=["account_id", "package_id"])
        )
        await self._execute(stmt)

    async def delete(self, account_id: AccountId, package_id: PackageId) -> bool:
        stmt = follows_table.delete().where(
            (follows_table.c.account_id == account_id)
            & (follows_table.c.package_id == package_id)
        )
        result = await self._execute(stmt)
        return result.rowcount > 0

    async def exists(self, account_id: AccountId, package_id: PackageId) -> bool:
        stmt = select(follows_table.c.account_id).where(
            (follows_table.c.account_id == account_id)
            & (follows_table.c.package_id == package_id)
        )
        result = await self._execute(stmt)
        return result.first() is not None

    async def find_package_ids_by_account(
        self, account_id: AccountId
    ) -> set[PackageId]:
        stmt = select(follows_table.c.package_id).where(
            follows_table.c.account_id == account_id
        )
        result = await self._execute(stmt)
        return {PackageId(package_id) for package_id in result.scalars().all()}
