"""Download aggregation domain service."""

import logfire

from depot.domain.repository import PackageRepository
from depot.domain.value import AccountId

from .base import Service


class DownloadService(Service):
    """Aggregates download counters over the packages an account owns."""

    def __init__(self, package_repository: PackageRepository) -> None:
        self.package_repository = package_repository

    async def total_downloads(self, account_id: AccountId) -> int:
        """Sum download counts of every package owned by the account.

        Args:
            account_id: Owning account

        Returns:
            Total downloads; 0 when the account owns no packages
        """
        with logfire.span(
            "download_service.total_downloads", account_id=str(account_id)
        ):
            total = await self.package_repository.sum_downloads_by_owner(account_id)
            logfire.info(
                "Downloads aggregated", account_id=str(account_id), total=total
            )
            return total
