"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from depot.domain.model.account import Account
from depot.domain.value import AccountId, Login, ProviderIdentity


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Writes are field-level: provider refreshes and email edits touch
    disjoint columns, so neither can clobber the other.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's surrogate identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: int) -> Optional[Account]:
        """Find an account by its identity-provider user id.

        Args:
            external_id: GitHub user id

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_login(self, login: Login) -> Optional[Account]:
        """Find an account by login.

        Logins can be recycled by the provider, so several rows may match.
        The one with the highest external id (the newest GitHub account)
        wins.

        Args:
            login: Provider login

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, identity: ProviderIdentity) -> Account:
        """Create an account from a provider identity.

        The provider email becomes the initial email.

        Args:
            identity: Verified provider identity

        Returns:
            The created account

        Raises:
            ConflictError: If an account with this external id already exists
        """
        pass

    @abstractmethod
    async def update_provider_fields(
        self, identity: ProviderIdentity
    ) -> Optional[Account]:
        """Overwrite login, name, avatar_url and access_token.

        Email is never written by this method.

        Args:
            identity: Verified provider identity (matched on external id)

        Returns:
            The updated account, None if no account has that external id
        """
        pass

    @abstractmethod
    async def update_email(
        self, account_id: AccountId, email: str
    ) -> Optional[Account]:
        """Set the account email, leaving every other column untouched.

        Args:
            account_id: Account to update
            email: New email address

        Returns:
            The updated account, None if the account does not exist
        """
        pass
