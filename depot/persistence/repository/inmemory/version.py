"""In-memory version repository for testing."""

from datetime import datetime
from typing import Collection, Optional

from depot.domain.error import ConflictError
from depot.domain.model.version import Version
from depot.domain.repository.version import VersionRepository
from depot.domain.value import PackageId, VersionId


class InMemoryVersionRepository(VersionRepository):
    """In-memory implementation of VersionRepository for testing."""

    def __init__(self) -> None:
        self._versions: dict[VersionId, Version] = {}
        self._next_id = 1

    async def create(
        self,
        package_id: PackageId,
        number: str,
        created_at: Optional[datetime] = None,
    ) -> Version:
        for existing in self._versions.values():
            if existing.package_id == package_id and existing.number == number:
                raise ConflictError(f"version {number} already exists")

        version = Version(
            id=VersionId(self._next_id),
            package_id=package_id,
            number=number,
            created_at=created_at or datetime.now(),
        )
        self._next_id += 1
        self._versions[version.id] = version
        return version

    async def find_by_package_ids(
        self,
        package_ids: Collection[PackageId],
        limit: int,
        offset: int = 0,
    ) -> list[Version]:
        matches = [v for v in self._versions.values() if v.package_id in package_ids]
        matches.sort(key=lambda v: (v.created_at, v.id), reverse=True)
        return matches[offset : offset + limit]
