"""Account domain service."""

import logfire

from depot.domain.error import ConflictError, NotFoundError
from depot.domain.model import Account
from depot.domain.repository import AccountRepository
from depot.domain.value import AccountId, Login, ProviderIdentity

from .base import Service


class AccountService(Service):
    """Keeps one account per external identity across repeated logins."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def reconcile(self, identity: ProviderIdentity) -> Account:
        """Create or refresh the account for a provider identity.

        A new identity gets a fresh account whose email is the provider
        email. A known identity has its provider-owned fields overwritten;
        the email is left alone because the user may have edited it.

        Two concurrent first logins race on the unique external id. The
        loser sees a ConflictError from insert and falls back to the
        update path, so both callers end up with the same account.

        Args:
            identity: Verified provider identity

        Returns:
            The account for this identity
        """
        with logfire.span(
            "account_service.reconcile",
            external_id=identity.external_id,
            login=identity.login.root,
        ):
            existing = await self.account_repository.find_by_external_id(
                identity.external_id
            )
            if existing is None:
                try:
                    account = await self.account_repository.insert(identity)
                    logfire.info(
                        "Account created",
                        account_id=str(account.id),
                        external_id=identity.external_id,
                    )
                    return account
                except ConflictError:
                    logfire.warn(
                        "Concurrent account creation, updating instead",
                        external_id=identity.external_id,
                    )

            account = await self.account_repository.update_provider_fields(identity)
            if account is None:
                # Row existed a moment ago; accounts are never deleted
                logfire.error(
                    "Account disappeared during reconcile",
                    external_id=identity.external_id,
                )
                raise RuntimeError(
                    f"account for external id {identity.external_id} vanished"
                )

            logfire.info(
                "Account refreshed",
                account_id=str(account.id),
                external_id=identity.external_id,
            )
            return account

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if account is None:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def get_by_login(self, login: Login) -> Account:
        """Get account by login.

        Args:
            login: Provider login

        Returns:
            The account currently holding that login

        Raises:
            NotFoundError: If no account has that login
        """
        with logfire.span("account_service.get_by_login", login=login.root):
            account = await self.account_repository.find_by_login(login)
            if account is None:
                logfire.warn("Account not found", login=login.root)
                raise NotFoundError("Account", login.root)
            return account

    async def get_by_external_id(self, external_id: int) -> Account:
        with logfire.span(
            "account_service.get_by_external_id", external_id=external_id
        ):
            account = await self.account_repository.find_by_external_id(external_id)
            if account is None:
                logfire.warn("Account not found", external_id=external_id)
                raise NotFoundError("Account", str(external_id))
            return account
