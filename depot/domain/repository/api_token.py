"""API token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from depot.domain.model.api_token import ApiToken
from depot.domain.value import AccountId


class ApiTokenRepository(ABC):
    """Repository for ApiToken entities."""

    @abstractmethod
    async def find_by_secret(self, secret: str) -> Optional[ApiToken]:
        """Find a token by exact secret match.

        Args:
            secret: Token secret as presented by the client

        Returns:
            The token if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_account(self, account_id: AccountId) -> list[ApiToken]:
        """List the tokens owned by an account, oldest first.

        Args:
            account_id: Owning account

        Returns:
            List of tokens (may be empty)
        """
        pass

    @abstractmethod
    async def insert(self, account_id: AccountId, name: str, secret: str) -> ApiToken:
        """Persist a new token.

        Args:
            account_id: Owning account
            name: Human-readable label
            secret: Generated secret

        Returns:
            The created token

        Raises:
            ConflictError: If the secret is already in use
        """
        pass
