"""Get updates use case."""

from datetime import datetime

from pydantic import BaseModel

from depot.domain.service import FeedService, PackageService
from depot.domain.value import AccountId


class GetUpdatesRequest(BaseModel):
    """Get updates request."""

    account_id: int
    page: int | None = None
    per_page: int | None = None


class VersionInfo(BaseModel):
    """Version information for response."""

    id: int
    package_name: str
    number: str
    downloads: int
    yanked: bool
    created_at: datetime


class FeedMeta(BaseModel):
    more: bool


class GetUpdatesResponse(BaseModel):
    """Get updates response."""

    versions: list[VersionInfo]
    meta: FeedMeta


class GetUpdatesUseCase:
    """Use case for the feed of new versions of followed packages."""

    def __init__(
        self, feed_service: FeedService, package_service: PackageService
    ) -> None:
        """Initialize get updates use case.

        Args:
            feed_service: Feed domain service
            package_service: Package domain service
        """
        self.feed_service = feed_service
        self.package_service = package_service

    async def execute(self, request: GetUpdatesRequest) -> GetUpdatesResponse:
        """Execute get updates flow.

        Steps:
        1. Load one page of versions from followed packages
        2. Batch-load their packages to attach names
        3. Return versions with the ``more`` flag

        Raises:
            InvalidInputError: If page or per_page is out of range
        """
        page = await self.feed_service.updates(
            AccountId(request.account_id), request.page, request.per_page
        )

        package_ids = list({version.package_id for version in page.versions})
        packages = await self.package_service.get_many(package_ids)

        return GetUpdatesResponse(
            versions=[
                VersionInfo(
                    id=version.id,
                    package_name=packages[version.package_id].name,
                    number=version.number,
                    downloads=version.download_count,
                    yanked=version.yanked,
                    created_at=version.created_at,
                )
                for version in page.versions
            ],
            meta=FeedMeta(more=page.more),
        )
