"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from depot.application.usecase.user import (
    GetUserPackagesUseCase,
    GetUserProfileUseCase,
    GetUserStatsUseCase,
    UpdateUserEmailUseCase,
)
from depot.application.usecase.user.get_user_packages import (
    GetUserPackagesRequest,
    GetUserPackagesResponse,
)
from depot.application.usecase.user.get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
)
from depot.application.usecase.user.get_user_stats import (
    GetUserStatsRequest,
    GetUserStatsResponse,
)
from depot.application.usecase.user.update_user_email import (
    UpdateUserEmailRequest,
    UpdateUserEmailResponse,
)
from depot.domain.error import DomainError, InvalidInputError
from depot.domain.service import AuthService
from depot.domain.value import Login
from depot.interface.api.credentials import require_account
from depot.interface.error import to_http_error

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class EmailEdit(BaseModel):
    email: str | None = None


class UpdateUserBody(BaseModel):
    """Body of ``PUT /users/{account_id}``: ``{"user": {"email": ...}}``."""

    user: EmailEdit


@router.get("/{login}", response_model=GetUserProfileResponse)
async def get_user_profile(
    login: str,
    use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Public profile by login. Email is never included."""
    try:
        try:
            parsed = Login(login)
        except ValueError as e:
            raise InvalidInputError(f"invalid login: {login}") from e
        return await use_case.execute(GetUserProfileRequest(login=parsed))
    except DomainError as e:
        raise to_http_error(e) from e


@router.put("/{account_id}", response_model=UpdateUserEmailResponse)
async def update_user_email(
    account_id: int,
    body: UpdateUserBody,
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[UpdateUserEmailUseCase],
) -> UpdateUserEmailResponse:
    """Change the caller's own email.

    Raises:
        HTTPException: 403 for someone else's account, 400 for a blank email
    """
    try:
        requesting_account_id = await require_account(request, auth_service)
        return await use_case.execute(
            UpdateUserEmailRequest(
                requesting_account_id=requesting_account_id,
                target_account_id=account_id,
                email=body.user.email,
            )
        )
    except DomainError as e:
        raise to_http_error(e) from e


@router.get("/{account_id}/stats", response_model=GetUserStatsResponse)
async def get_user_stats(
    account_id: int,
    use_case: FromDishka[GetUserStatsUseCase],
) -> GetUserStatsResponse:
    """Total downloads across the account's packages."""
    try:
        return await use_case.execute(GetUserStatsRequest(account_id=account_id))
    except DomainError as e:
        raise to_http_error(e) from e


@router.get("/{account_id}/packages", response_model=GetUserPackagesResponse)
async def get_user_packages(
    account_id: int,
    use_case: FromDishka[GetUserPackagesUseCase],
) -> GetUserPackagesResponse:
    try:
        return await use_case.execute(GetUserPackagesRequest(account_id=account_id))
    except DomainError as e:
        raise to_http_error(e) from e
