"""Package domain service."""

from typing import Sequence

import logfire

from depot.domain.error import NotFoundError
from depot.domain.model import Package
from depot.domain.repository import PackageRepository
from depot.domain.value import AccountId, PackageId

from .base import Service


class PackageService(Service):
    """Read-side package lookups used by follows and the feed."""

    def __init__(self, package_repository: PackageRepository) -> None:
        """Initialize package service.

        Args:
            package_repository: Package repository
        """
        self.package_repository = package_repository

    async def get_by_name(self, name: str) -> Package:
        """Get package by name.

        Args:
            name: Package name

        Returns:
            The package

        Raises:
            NotFoundError: If no package has that name
        """
        with logfire.span("package_service.get_by_name", name=name):
            package = await self.package_repository.find_by_name(name)
            if package is None:
                logfire.warn("Package not found", name=name)
                raise NotFoundError("Package", name)
            return package

    async def get_many(
        self, package_ids: Sequence[PackageId]
    ) -> dict[PackageId, Package]:
        """Load several packages in one query, keyed by id."""
        packages = await self.package_repository.find_by_ids(package_ids)
        return {package.id: package for package in packages}

    async def owned_by(self, account_id: AccountId) -> list[Package]:
        with logfire.span("package_service.owned_by", account_id=str(account_id)):
            return await self.package_repository.find_by_owner(account_id)
