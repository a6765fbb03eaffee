"""Profile editing domain service."""

from typing import Optional

import logfire

from depot.domain.error import ForbiddenError, InvalidInputError, NotFoundError
from depot.domain.model import Account
from depot.domain.repository import AccountRepository
from depot.domain.value import AccountId

from .base import Service


class ProfileService(Service):
    """Domain service for user-editable account fields."""

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def update_email(
        self,
        requesting_account_id: AccountId,
        target_account_id: AccountId,
        new_email: Optional[str],
    ) -> Account:
        """Change an account's email.

        Only the account itself may change its email. The write touches
        the email column alone, so it cannot race with a reconcile.

        Args:
            requesting_account_id: Authenticated caller
            target_account_id: Account being edited
            new_email: New address; must be non-blank

        Returns:
            The updated account

        Raises:
            ForbiddenError: If the caller is not the target account
            InvalidInputError: If the email is missing or blank
            NotFoundError: If the target account does not exist
        """
        with logfire.span(
            "profile_service.update_email",
            requesting_account_id=str(requesting_account_id),
            target_account_id=str(target_account_id),
        ):
            if requesting_account_id != target_account_id:
                logfire.warn(
                    "Email edit for another account rejected",
                    requesting_account_id=str(requesting_account_id),
                    target_account_id=str(target_account_id),
                )
                raise ForbiddenError("current user does not match requested user")

            if new_email is None or not new_email.strip():
                raise InvalidInputError("empty email rejected")

            account = await self.account_repository.update_email(
                target_account_id, new_email.strip()
            )
            if account is None:
                raise NotFoundError("Account", str(target_account_id))

            logfire.info("Email updated", account_id=str(account.id))
            return account
