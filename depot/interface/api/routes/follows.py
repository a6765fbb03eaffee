"""Package follow routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from depot.application.usecase.follow import (
    FollowPackageUseCase,
    GetFollowingUseCase,
    UnfollowPackageUseCase,
)
from depot.application.usecase.follow.follow_package import (
    FollowPackageRequest,
    FollowPackageResponse,
)
from depot.application.usecase.follow.get_following import (
    GetFollowingRequest,
    GetFollowingResponse,
)
from depot.application.usecase.follow.unfollow_package import (
    UnfollowPackageRequest,
    UnfollowPackageResponse,
)
from depot.domain.error import DomainError
from depot.domain.service import AuthService
from depot.interface.api.credentials import require_account
from depot.interface.error import to_http_error

router = APIRouter(prefix="/packages", tags=["follows"], route_class=DishkaRoute)


@router.put("/{name}/follow", response_model=FollowPackageResponse)
async def follow_package(
    name: str,
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[FollowPackageUseCase],
) -> FollowPackageResponse:
    """Follow a package. Following twice is not an error."""
    try:
        account_id = await require_account(request, auth_service)
        return await use_case.execute(
            FollowPackageRequest(account_id=account_id, package_name=name)
        )
    except DomainError as e:
        raise to_http_error(e) from e


@router.delete("/{name}/follow", response_model=UnfollowPackageResponse)
async def unfollow_package(
    name: str,
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[UnfollowPackageUseCase],
) -> UnfollowPackageResponse:
    """Unfollow a package. Unfollowing one not followed is not an error."""
    try:
        account_id = await require_account(request, auth_service)
        return await use_case.execute(
            UnfollowPackageRequest(account_id=account_id, package_name=name)
        )
    except DomainError as e:
        raise to_http_error(e) from e


@router.get("/{name}/following", response_model=GetFollowingResponse)
async def get_following(
    name: str,
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[GetFollowingUseCase],
) -> GetFollowingResponse:
    try:
        account_id = await require_account(request, auth_service)
        return await use_case.execute(
            GetFollowingRequest(account_id=account_id, package_name=name)
        )
    except DomainError as e:
        raise to_http_error(e) from e
