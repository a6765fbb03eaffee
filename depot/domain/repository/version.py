"""Version repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Collection, Optional

from depot.domain.model.version import Version
from depot.domain.value import PackageId


class VersionRepository(ABC):
    """Repository for Version entities."""

    @abstractmethod
    async def create(
        self,
        package_id: PackageId,
        number: str,
        created_at: Optional[datetime] = None,
    ) -> Version:
        """Create a version of a package.

        Args:
            package_id: Owning package
            number: Version number, e.g. "1.0.0"
            created_at: Publication time (defaults to now)

        Returns:
            The created version

        Raises:
            ConflictError: If the package already has that version number
        """
        pass

    @abstractmethod
    async def find_by_package_ids(
        self,
        package_ids: Collection[PackageId],
        limit: int,
        offset: int = 0,
    ) -> list[Version]:
        """Find versions of the given packages, newest first.

        Ordered by created_at descending, then id descending so that
        pages are deterministic when timestamps tie.

        Args:
            package_ids: Packages to include
            limit: Maximum rows to return
            offset: Rows to skip

        Returns:
            List of versions
        """
        pass
