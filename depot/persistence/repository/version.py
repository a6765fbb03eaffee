"""PostgreSQL implementation of Version repository."""

from datetime import datetime
from typing import Collection, Optional

from sqlalchemy import select

from depot.domain.model import Version
from depot.domain.repository import VersionRepository
from depot.domain.value import PackageId
from depot.persistence.mappers import row_to_version
from depot.persistence.repository.base import INT8_MAX, PostgresRepository
from depot.persistence.tables import versions_table


class PostgresVersionRepository(PostgresRepository, VersionRepository):
    """PostgreSQL implementation of VersionRepository."""

    async def create(
        self,
        package_id: PackageId,
        number: str,
        created_at: Optional[datetime] = None,
    ) -> Version:
        values = {"package_id": package_id, "number": number}
        if created_at is not None:
            values["created_at"] = created_at
        stmt = versions_table.insert().values(**values).returning(versions_table)
        result = await self._execute(
            stmt, conflict_message=f"version {number} already exists"
        )
        return row_to_version(result.mappings().one())

    async def find_by_package_ids(
        self,
        package_ids: Collection[PackageId],
        limit: int,
        offset: int = 0,
    ) -> list[Version]:
        """Page through versions of the given packages, newest first.

        Served by idx_versions_package_created.
        """
        if not package_ids:
            return []
        if offset + limit > INT8_MAX:
            return []
        stmt = (
            select(versions_table)
            .where(versions_table.c.package_id.in_(list(package_ids)))
            .order_by(versions_table.c.created_at.desc(), versions_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(stmt)
        return [row_to_version(row) for row in result.mappings().all()]
