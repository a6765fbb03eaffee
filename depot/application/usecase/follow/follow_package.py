"""Follow package use case."""

from pydantic import BaseModel

from depot.domain.service import FollowService, PackageService
from depot.domain.value import AccountId


class FollowPackageRequest(BaseModel):
    """Follow package request."""

    account_id: int
    package_name: str


class FollowPackageResponse(BaseModel):
    ok: bool = True


class FollowPackageUseCase:
    """Use case for following a package by name."""

    def __init__(
        self, follow_service: FollowService, package_service: PackageService
    ) -> None:
        """Initialize follow package use case.

        Args:
            follow_service: Follow domain service
            package_service: Package domain service
        """
        self.follow_service = follow_service
        self.package_service = package_service

    async def execute(self, request: FollowPackageRequest) -> FollowPackageResponse:
        """Follow a package; following it again is a no-op.

        Raises:
            NotFoundError: If the package does not exist
        """
        package = await self.package_service.get_by_name(request.package_name)
        await self.follow_service.follow(AccountId(request.account_id), package.id)
        return FollowPackageResponse()
