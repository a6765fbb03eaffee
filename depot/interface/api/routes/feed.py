"""Feed routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from depot.application.usecase.feed import GetUpdatesUseCase
from depot.application.usecase.feed.get_updates import (
    GetUpdatesRequest,
    GetUpdatesResponse,
)
from depot.domain.error import DomainError
from depot.domain.service import AuthService
from depot.interface.api.credentials import require_account
from depot.interface.error import to_http_error

router = APIRouter(tags=["feed"], route_class=DishkaRoute)


@router.get("/me/updates", response_model=GetUpdatesResponse)
async def get_updates(
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[GetUpdatesUseCase],
    page: int | None = None,
    per_page: int | None = None,
) -> GetUpdatesResponse:
    """New versions of packages the caller follows, newest first.

    Example:
        GET /me/updates?page=2&per_page=10

        {"versions": [...], "meta": {"more": true}}
    """
    try:
        account_id = await require_account(request, auth_service)
        return await use_case.execute(
            GetUpdatesRequest(account_id=account_id, page=page, per_page=per_page)
        )
    except DomainError as e:
        raise to_http_error(e) from e
