"""In-memory follow repository for testing."""

from depot.domain.repository.follow import FollowRepository
from depot.domain.value import AccountId, PackageId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: set[tuple[AccountId, PackageId]] = set()

    async def insert(self, account_id: AccountId, package_id: PackageId) -> None:
        self._follows.add((account_id, package_id))

    async def delete(self, account_id: AccountId, package_id: PackageId) -> bool:
        key = (account_id, package_id)
        if key not in self._follows:
            return False
        self._follows.remove(key)
        return True

    async def exists(self, account_id: AccountId, package_id: PackageId) -> bool:
        return (account_id, package_id) in self._follows

    async def find_package_ids_by_account(
        self, account_id: AccountId
    ) -> set[PackageId]:
        return {pid for aid, pid in self._follows if aid == account_id}
