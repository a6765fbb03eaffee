"""Get following use case."""

from pydantic import BaseModel

from depot.domain.service import FollowService, PackageService
from depot.domain.value import AccountId


class GetFollowingRequest(BaseModel):
    account_id: int
    package_name: str


class GetFollowingResponse(BaseModel):
    following: bool


class GetFollowingUseCase:
    """Use case for checking whether the caller follows a package."""

    def __init__(
        self, follow_service: FollowService, package_service: PackageService
    ) -> None:
        self.follow_service = follow_service
        self.package_service = package_service

    async def execute(self, request: GetFollowingRequest) -> GetFollowingResponse:
        package = await self.package_service.get_by_name(request.package_name)
        following = await self.follow_service.is_following(
            AccountId(request.account_id), package.id
        )
        return GetFollowingResponse(following=following)
