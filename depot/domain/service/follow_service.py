"""Follow domain service."""

import logfire

from depot.domain.repository import FollowRepository
from depot.domain.value import AccountId, PackageId

from .base import Service


class FollowService(Service):
    """Domain service for the account -> package follow graph.

    Following twice or unfollowing something never followed is not an
    error; both leave the graph in the requested state.
    """

    def __init__(self, follow_repository: FollowRepository) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
        """
        self.follow_repository = follow_repository

    async def follow(self, account_id: AccountId, package_id: PackageId) -> None:
        with logfire.span(
            "follow_service.follow",
            account_id=str(account_id),
            package_id=str(package_id),
        ):
            await self.follow_repository.insert(account_id, package_id)
            logfire.info(
                "Package followed",
                account_id=str(account_id),
                package_id=str(package_id),
            )

    async def unfollow(self, account_id: AccountId, package_id: PackageId) -> None:
        with logfire.span(
            "follow_service.unfollow",
            account_id=str(account_id),
            package_id=str(package_id),
        ):
            removed = await self.follow_repository.delete(account_id, package_id)
            logfire.info(
                "Package unfollowed",
                account_id=str(account_id),
                package_id=str(package_id),
                removed=removed,
            )

    async def is_following(self, account_id: AccountId, package_id: PackageId) -> bool:
        """Check whether an account follows a package."""
        return await self.follow_repository.exists(account_id, package_id)

    async def followed_package_ids(self, account_id: AccountId) -> set[PackageId]:
        """Get the ids of every package an account follows.

        Args:
            account_id: Following account

        Returns:
            Set of package ids
        """
        with logfire.span(
            "follow_service.followed_package_ids", account_id=str(account_id)
        ):
            return await self.follow_repository.find_package_ids_by_account(
                account_id
            )
