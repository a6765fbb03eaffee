"""Update user email use case."""

from pydantic import BaseModel

from depot.domain.service import ProfileService
from depot.domain.value import AccountId


class UpdateUserEmailRequest(BaseModel):
    """Update user email request."""

    requesting_account_id: int
    target_account_id: int
    email: str | None


class UpdateUserEmailResponse(BaseModel):
    ok: bool = True


class UpdateUserEmailUseCase:
    """Use case for changing an account's email."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: UpdateUserEmailRequest) -> UpdateUserEmailResponse:
        """Change the email of the caller's own account.

        Raises:
            ForbiddenError: If the caller targets another account
            InvalidInputError: If the email is blank
            NotFoundError: If the account does not exist
        """
        await self.profile_service.update_email(
            AccountId(request.requesting_account_id),
            AccountId(request.target_account_id),
            request.email,
        )
        return UpdateUserEmailResponse()
