"""Get user packages use case."""

from datetime import datetime

from pydantic import BaseModel

from depot.domain.service import AccountService, PackageService
from depot.domain.value import AccountId


class GetUserPackagesRequest(BaseModel):
    account_id: int


class PackageInfo(BaseModel):
    """Package summary for response."""

    id: int
    name: str
    description: str | None
    downloads: int
    updated_at: datetime


class GetUserPackagesResponse(BaseModel):
    packages: list[PackageInfo]


class GetUserPackagesUseCase:
    """Use case for listing the packages an account owns."""

    def __init__(
        self, account_service: AccountService, package_service: PackageService
    ) -> None:
        self.account_service = account_service
        self.package_service = package_service

    async def execute(self, request: GetUserPackagesRequest) -> GetUserPackagesResponse:
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        packages = await self.package_service.owned_by(account.id)
        return GetUserPackagesResponse(
            packages=[
                PackageInfo(
                    id=package.id,
                    name=package.name,
                    description=package.description,
                    downloads=package.download_count,
                    updated_at=package.updated_at,
                )
                for package in packages
            ]
        )
