"""Unfollow package use case."""

from pydantic import BaseModel

from depot.domain.service import FollowService, PackageService
from depot.domain.value import AccountId


class UnfollowPackageRequest(BaseModel):
    """Unfollow package request."""

    account_id: int
    package_name: str


class UnfollowPackageResponse(BaseModel):
    ok: bool = True


class UnfollowPackageUseCase:
    """Use case for unfollowing a package by name."""

    def __init__(
        self, follow_service: FollowService, package_service: PackageService
    ) -> None:
        self.follow_service = follow_service
        self.package_service = package_service

    async def execute(self, request: UnfollowPackageRequest) -> UnfollowPackageResponse:
        """Unfollow a package; unfollowing one not followed is a no-op.

        Raises:
            NotFoundError: If the package does not exist
        """
        package = await self.package_service.get_by_name(request.package_name)
        await self.follow_service.unfollow(AccountId(request.account_id), package.id)
        return UnfollowPackageResponse()
