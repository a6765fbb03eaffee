"""In-memory account repository for testing."""

from datetime import datetime
from typing import Optional

from depot.domain.error import ConflictError
from depot.domain.model.account import Account
from depot.domain.repository.account import AccountRepository
from depot.domain.value import AccountId, Login, ProviderIdentity


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Mirrors the unique index on external_id by raising ConflictError.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self._next_id = 1

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        return self._accounts.get(account_id)

    async def find_by_external_id(self, external_id: int) -> Optional[Account]:
        for account in self._accounts.values():
            if account.external_id == external_id:
                return account
        return None

    async def find_by_login(self, login: Login) -> Optional[Account]:
        matches = [a for a in self._accounts.values() if a.login == login]
        if not matches:
            return None
        return max(matches, key=lambda a: a.external_id)

    async def insert(self, identity: ProviderIdentity) -> Account:
        for account in self._accounts.values():
            if account.external_id == identity.external_id:
                raise ConflictError(
                    f"account for external id {identity.external_id} exists"
                )

        now = datetime.now()
        account = Account(
            id=AccountId(self._next_id),
            external_id=identity.external_id,
            login=identity.login,
            name=identity.name,
            avatar_url=identity.avatar_url,
            email=identity.email,
            access_token=identity.access_token,
            created_at=now,
            updated_at=now,
        )
        self._next_id += 1
        self._accounts[account.id] = account
        return account

    async def update_provider_fields(
        self, identity: ProviderIdentity
    ) -> Optional[Account]:
        account = await self.find_by_external_id(identity.external_id)
        if account is None:
            return None
        updated = account.model_copy(
            update={
                "login": identity.login,
                "name": identity.name,
                "avatar_url": identity.avatar_url,
                "access_token": identity.access_token,
                "updated_at": datetime.now(),
            }
        )
        self._accounts[updated.id] = updated
        return updated

    async def update_email(
        self, account_id: AccountId, email: str
    ) -> Optional[Account]:
        account = self._accounts.get(account_id)
        if account is None:
            return None
        updated = account.model_copy(
            update={"email": email, "updated_at": datetime.now()}
        )
        self._accounts[account_id] = updated
        return updated
