"""In-memory package repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from depot.domain.error import ConflictError
from depot.domain.model.package import Package
from depot.domain.repository.package import PackageRepository
from depot.domain.value import AccountId, PackageId


class InMemoryPackageRepository(PackageRepository):
    """In-memory implementation of PackageRepository for testing."""

    def __init__(self) -> None:
        self._packages: dict[PackageId, Package] = {}
        self._owners: set[tuple[PackageId, AccountId]] = set()
        self._next_id = 1

    async def find_by_id(self, package_id: PackageId) -> Optional[Package]:
        return self._packages.get(package_id)

    async def find_by_name(self, name: str) -> Optional[Package]:
        for package in self._packages.values():
            if package.name == name:
                return package
        return None

    async def find_by_ids(self, package_ids: Sequence[PackageId]) -> list[Package]:
        return [self._packages[pid] for pid in package_ids if pid in self._packages]

    async def find_by_owner(self, account_id: AccountId) -> list[Package]:
        owned = [
            self._packages[pid]
            for pid, aid in self._owners
            if aid == account_id and pid in self._packages
        ]
        return sorted(owned, key=lambda p: p.name)

    async def create(
        self,
        name: str,
        description: Optional[str] = None,
        download_count: int = 0,
    ) -> Package:
        if await self.find_by_name(name) is not None:
            raise ConflictError(f"package name taken: {name}")

        now = datetime.now()
        package = Package(
            id=PackageId(self._next_id),
            name=name,
            description=description,
            download_count=download_count,
            created_at=now,
            updated_at=now,
        )
        self._next_id += 1
        self._packages[package.id] = package
        return package

    async def add_owner(self, package_id: PackageId, account_id: AccountId) -> None:
        self._owners.add((package_id, account_id))

    async def add_downloads(self, package_id: PackageId, amount: int) -> None:
        package = self._packages.get(package_id)
        if package:
            self._packages[package_id] = package.model_copy(
                update={
                    "download_count": package.download_count + amount,
                    "updated_at": datetime.now(),
                }
            )

    async def sum_downloads_by_owner(self, account_id: AccountId) -> int:
        return sum(p.download_count for p in await self.find_by_owner(account_id))
