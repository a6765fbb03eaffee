"""Get user stats use case."""

from pydantic import BaseModel

from depot.domain.service import AccountService, DownloadService
from depot.domain.value import AccountId


class GetUserStatsRequest(BaseModel):
    account_id: int


class GetUserStatsResponse(BaseModel):
    total_downloads: int


class GetUserStatsUseCase:
    """Use case for an account's aggregate download count."""

    def __init__(
        self, account_service: AccountService, download_service: DownloadService
    ) -> None:
        self.account_service = account_service
        self.download_service = download_service

    async def execute(self, request: GetUserStatsRequest) -> GetUserStatsResponse:
        """Sum downloads over the account's packages.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        total = await self.download_service.total_downloads(account.id)
        return GetUserStatsResponse(total_downloads=total)
