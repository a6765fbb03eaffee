"""In-memory API token repository for testing."""

from datetime import datetime
from typing import Optional

from depot.domain.error import ConflictError
from depot.domain.model.api_token import ApiToken
from depot.domain.repository.api_token import ApiTokenRepository
from depot.domain.value import AccountId, ApiTokenId


class InMemoryApiTokenRepository(ApiTokenRepository):
    """In-memory implementation of ApiTokenRepository for testing."""

    def __init__(self) -> None:
        self._tokens: dict[ApiTokenId, ApiToken] = {}
        self._next_id = 1

    async def find_by_secret(self, secret: str) -> Optional[ApiToken]:
        for token in self._tokens.values():
            if token.secret == secret:
                return token
        return None

    async def find_all_by_account(self, account_id: AccountId) -> list[ApiToken]:
        tokens = [t for t in self._tokens.values() if t.account_id == account_id]
        return sorted(tokens, key=lambda t: (t.created_at, t.id))

    async def insert(self, account_id: AccountId, name: str, secret: str) -> ApiToken:
        if await self.find_by_secret(secret) is not None:
            raise ConflictError("api token secret in use")

        token = ApiToken(
            id=ApiTokenId(self._next_id),
            account_id=account_id,
            name=name,
            secret=secret,
            created_at=datetime.now(),
        )
        self._next_id += 1
        self._tokens[token.id] = token
        return token
