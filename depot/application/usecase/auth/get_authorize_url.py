"""Get authorize URL use case."""

import secrets

from pydantic import BaseModel

from depot.domain.service import AuthService


class GetAuthorizeUrlRequest(BaseModel):
    """Get authorize URL request (no parameters)."""

    pass


class GetAuthorizeUrlResponse(BaseModel):
    """Where to send the browser, and the state it must come back with."""

    url: str
    state: str


class GetAuthorizeUrlUseCase:
    """Use case for starting a GitHub login."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(
        self, request: GetAuthorizeUrlRequest
    ) -> GetAuthorizeUrlResponse:
        state = secrets.token_hex(16)
        return GetAuthorizeUrlResponse(
            url=self.auth_service.authorize_url(state), state=state
        )
