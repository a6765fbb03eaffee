"""Follow repository interface."""

from abc import ABC, abstractmethod

from depot.domain.value import AccountId, PackageId


class FollowRepository(ABC):
    """Repository for the account -> package follow relation.

    Both writes are idempotent: inserting an existing pair and deleting a
    missing pair succeed silently.
    """

    @abstractmethod
    async def insert(self, account_id: AccountId, package_id: PackageId) -> None:
        """Record that an account follows a package.

        Args:
            account_id: Following account
            package_id: Followed package
        """
        pass

    @abstractmethod
    async def delete(self, account_id: AccountId, package_id: PackageId) -> bool:
        """Remove a follow.

        Args:
            account_id: Following account
            package_id: Followed package

        Returns:
            True if a row was deleted, False if the pair was not followed
        """
        pass

    @abstractmethod
    async def exists(self, account_id: AccountId, package_id: PackageId) -> bool:
        """Check whether an account follows a package."""
        pass

    @abstractmethod
    async def find_package_ids_by_account(
        self, account_id: AccountId
    ) -> set[PackageId]:
        """Get the ids of every package an account follows.

        Args:
            account_id: Following account

        Returns:
            Set of package ids (empty if none followed)
        """
        pass
