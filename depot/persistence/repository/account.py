"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import func, select

from depot.domain.model import Account
from depot.domain.repository import AccountRepository
from depot.domain.value import AccountId, Login, ProviderIdentity
from depot.persistence.mappers import row_to_account
from depot.persistence.repository.base import PostgresRepository, fits_int4
from depot.persistence.tables import accounts_table


class PostgresAccountRepository(PostgresRepository, AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        if not fits_int4(account_id):
            return None
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_account(row) if row else None

    async def find_by_external_id(self, external_id: int) -> Optional[Account]:
        stmt = select(accounts_table).where(
            accounts_table.c.external_id == external_id
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_account(row) if row else None

    async def find_by_login(self, login: Login) -> Optional[Account]:
        """Find the newest GitHub account currently holding a login.

        Args:
            login: Login to search for

        Returns:
            Account with the highest external id for that login, or None
        """
        stmt = (
            select(accounts_table)
            .where(accounts_table.c.login == login.root)
            .order_by(accounts_table.c.external_id.desc())
            .limit(1)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_account(row) if row else None

    async def insert(self, identity: ProviderIdentity) -> Account:
        """Insert an account inside a savepoint.

        A unique violation on external_id rolls back only the savepoint, so
        the caller can continue with an update in the same transaction.

        Args:
            identity: Provider identity

        Returns:
            Created account

        Raises:
            ConflictError: If the external id is already taken
        """
        stmt = (
            accounts_table.insert()
            .values(
                external_id=identity.external_id,
                login=identity.login.root,
                name=identity.name,
                avatar_url=identity.avatar_url,
                email=identity.email,
                access_token=identity.access_token,
            )
            .returning(accounts_table)
        )
        async with self.session.begin_nested():
            result = await self._execute(
                stmt,
                conflict_message=(
                    f"account for external id {identity.external_id} exists"
                ),
            )
            row = result.mappings().one()
        return row_to_account(row)

    async def update_provider_fields(
        self, identity: ProviderIdentity
    ) -> Optional[Account]:
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.external_id == identity.external_id)
            .values(
                login=identity.login.root,
                name=identity.name,
                avatar_url=identity.avatar_url,
                access_token=identity.access_token,
                updated_at=func.now(),
            )
            .returning(accounts_table)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_account(row) if row else None

    async def update_email(
        self, account_id: AccountId, email: str
    ) -> Optional[Account]:
        if not fits_int4(account_id):
            return None
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(email=email, updated_at=func.now())
            .returning(accounts_table)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_account(row) if row else None
