"""PostgreSQL implementation of ApiToken repository."""

from typing import Optional

from sqlalchemy import select

from depot.domain.model import ApiToken
from depot.domain.repository import ApiTokenRepository
from depot.domain.value import AccountId
from depot.persistence.mappers import row_to_api_token
from depot.persistence.repository.base import PostgresRepository
from depot.persistence.tables import api_tokens_table


class PostgresApiTokenRepository(PostgresRepository, ApiTokenRepository):
    """PostgreSQL implementation of ApiTokenRepository."""

    async def find_by_secret(self, secret: str) -> Optional[ApiToken]:
        stmt = select(api_tokens_table).where(api_tokens_table.c.secret == secret)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_api_token(row) if row else None

    async def find_all_by_account(self, account_id: AccountId) -> list[ApiToken]:
        stmt = (
            select(api_tokens_table)
            .where(api_tokens_table.c.account_id == account_id)
            .order_by(api_tokens_table.c.created_at, api_tokens_table.c.id)
        )
        result = await self._execute(stmt)
        return [row_to_api_token(row) for row in result.mappings().all()]

    async def insert(self, account_id: AccountId, name: str, secret: str) -> ApiToken:
        stmt = (
            api_tokens_table.insert()
            .values(account_id=account_id, name=name, secret=secret)
            .returning(api_tokens_table)
        )
        result = await self._execute(stmt, conflict_message="api token secret in use")
        return row_to_api_token(result.mappings().one())
