"""Package repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from depot.domain.model.package import Package
from depot.domain.value import AccountId, PackageId


class PackageRepository(ABC):
    """Repository for Package entities and their ownership relation.

    Publishing lives elsewhere; ``create`` exists for seeding and tests.
    """

    @abstractmethod
    async def find_by_id(self, package_id: PackageId) -> Optional[Package]:
        """Find a package by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Package]:
        """Find a package by its exact name.

        Args:
            name: Package name

        Returns:
            The package if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, package_ids: Sequence[PackageId]) -> list[Package]:
        """Find several packages at once (batch query).

        Args:
            package_ids: Ids to look up; unknown ids are skipped

        Returns:
            List of packages in no particular order
        """
        pass

    @abstractmethod
    async def find_by_owner(self, account_id: AccountId) -> list[Package]:
        """List packages owned by an account, ordered by name."""
        pass

    @abstractmethod
    async def create(
        self,
        name: str,
        description: Optional[str] = None,
        download_count: int = 0,
    ) -> Package:
        """Create a package.

        Args:
            name: Unique package name
            description: Optional description
            download_count: Initial download counter

        Returns:
            The created package

        Raises:
            ConflictError: If the name is taken
        """
        pass

    @abstractmethod
    async def add_owner(self, package_id: PackageId, account_id: AccountId) -> None:
        """Make an account an owner of a package (idempotent)."""
        pass

    @abstractmethod
    async def add_downloads(self, package_id: PackageId, amount: int) -> None:
        """Atomically add to a package's download counter.

        Args:
            package_id: Package to update
            amount: Number of downloads to add
        """
        pass

    @abstractmethod
    async def sum_downloads_by_owner(self, account_id: AccountId) -> int:
        """Sum download counters over every package an account owns.

        Args:
            account_id: Owning account

        Returns:
            Total downloads, 0 when the account owns nothing
        """
        pass
