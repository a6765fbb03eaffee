"""Feed domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from depot.config import FeedSettings
from depot.domain.error import InvalidInputError
from depot.domain.model import Version
from depot.domain.repository import FollowRepository, VersionRepository
from depot.domain.value import AccountId

from .base import Service


@dataclass
class FeedPage:
    """One page of the followed-packages feed.

    ``more`` is True when at least one further row exists past this page.
    """

    versions: list[Version]
    more: bool


class FeedService(Service):
    """Domain service for the followed-packages version feed."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        version_repository: VersionRepository,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize feed service.

        Args:
            follow_repository: Follow repository
            version_repository: Version repository
            feed_settings: Page size defaults and limits
        """
        self.follow_repository = follow_repository
        self.version_repository = version_repository
        self.feed_settings = feed_settings

    async def updates(
        self,
        account_id: AccountId,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> FeedPage:
        """Get a page of versions of packages the account follows.

        Versions are ordered newest first, ties broken by id descending.
        One extra row is fetched to decide ``more`` without a count query.

        Args:
            account_id: Following account
            page: 1-based page number (defaults to 1)
            per_page: Page size (defaults to the configured default)

        Returns:
            The requested page

        Raises:
            InvalidInputError: If page or per_page is out of range
        """
        if page is None:
            page = 1
        if per_page is None:
            per_page = self.feed_settings.default_per_page

        with logfire.span(
            "feed_service.updates",
            account_id=str(account_id),
            page=page,
            per_page=per_page,
        ):
            if page < 1:
                raise InvalidInputError(
                    "page indexing starts from 1, page 0 is invalid"
                )
            if per_page < 1:
                raise InvalidInputError("per_page must be at least 1")
            if per_page > self.feed_settings.max_per_page:
                raise InvalidInputError(
                    f"cannot request more than {self.feed_settings.max_per_page} items"
                )

            package_ids = await self.follow_repository.find_package_ids_by_account(
                account_id
            )
            if not package_ids:
                return FeedPage(versions=[], more=False)

            rows = await self.version_repository.find_by_package_ids(
                package_ids,
                limit=per_page + 1,
                offset=(page - 1) * per_page,
            )

            more = len(rows) > per_page
            logfire.info(
                "Feed page loaded",
                account_id=str(account_id),
                followed=len(package_ids),
                returned=min(len(rows), per_page),
                more=more,
            )
            return FeedPage(versions=rows[:per_page], more=more)
