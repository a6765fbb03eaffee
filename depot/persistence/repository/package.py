"""PostgreSQL implementation of Package repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert

from depot.domain.model import Package
from depot.domain.repository import PackageRepository
from depot.domain.value import AccountId, PackageId
from depot.persistence.mappers import row_to_package
from depot.persistence.repository.base import PostgresRepository
from depot.persistence.tables import package_owners_table, packages_table


class PostgresPackageRepository(PostgresRepository, PackageRepository):
    """PostgreSQL implementation of PackageRepository."""

    async def find_by_id(self, package_id: PackageId) -> Optional[Package]:
        stmt = select(packages_table).where(packages_table.c.id == package_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_package(row) if row else None

    async def find_by_name(self, name: str) -> Optional[Package]:
        stmt = select(packages_table).where(packages_table.c.name == name)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_package(row) if row else None

    async def find_by_ids(self, package_ids: Sequence[PackageId]) -> list[Package]:
        if not package_ids:
            return []
        stmt = select(packages_table).where(packages_table.c.id.in_(package_ids))
        result = await self._execute(stmt)
        return [row_to_package(row) for row in result.mappings().all()]

    async def find_by_owner(self, account_id: AccountId) -> list[Package]:
        stmt = (
            select(packages_table)
            .select_from(
                packages_table.join(
                    package_owners_table,
                    packages_table.c.id == package_owners_table.c.package_id,
                )
            )
            .where(package_owners_table.c.account_id == account_id)
            .order_by(packages_table.c.name)
        )
        result = await self._execute(stmt)
        return [row_to_package(row) for row in result.mappings().all()]

    async def create(
        self,
        name: str,
        description: Optional[str] = None,
        download_count: int = 0,
    ) -> Package:
        stmt = (
            packages_table.insert()
            .values(name=name, description=description, download_count=download_count)
            .returning(packages_table)
        )
        result = await self._execute(
            stmt, conflict_message=f"package name taken: {name}"
        )
        return row_to_package(result.mappings().one())

    async def add_owner(self, package_id: PackageId, account_id: AccountId) -> None:
        stmt = (
            insert(package_owners_table)
            .values(package_id=package_id, account_id=account_id)
            .on_conflict_do_nothing(index_elements=["package_id", "account_id"])
        )
        await self._execute(stmt)

    async def add_downloads(self, package_id: PackageId, amount: int) -> None:
        """Atomically add to the download counter.

        Args:
            package_id: Package to update
            amount: Downloads to add
        """
        stmt = (
            packages_table.update()
            .where(packages_table.c.id == package_id)
            .values(
                download_count=packages_table.c.download_count + amount,
                updated_at=func.now(),
            )
        )
        await self._execute(stmt)

    async def sum_downloads_by_owner(self, account_id: AccountId) -> int:
        """Sum download counters in a single aggregate query.

        Args:
            account_id: Owning account

        Returns:
            Total downloads, 0 when nothing is owned
        """
        stmt = (
            select(func.coalesce(func.sum(packages_table.c.download_count), 0))
            .select_from(
                packages_table.join(
                    package_owners_table,
                    packages_table.c.id == package_owners_table.c.package_id,
                )
            )
            .where(package_owners_table.c.account_id == account_id)
        )
        result = await self._execute(stmt)
        # SUM over BIGINT comes back as NUMERIC
        return int(result.scalar_one())
