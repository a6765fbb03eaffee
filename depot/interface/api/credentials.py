"""Request credential extraction."""

from fastapi import Request

from depot.domain.service import AuthService
from depot.domain.value import (
    AccountId,
    Credentials,
    SessionCredentials,
    TokenCredentials,
)

SESSION_COOKIE = "auth_token"


def read_credentials(request: Request) -> Credentials | None:
    """Pull credentials off a request.

    The session cookie wins over the Authorization header. The header
    carries an API token, either bare or with a ``Bearer`` prefix.

    Args:
        request: Incoming request

    Returns:
        Credentials, or None if the request carries neither
    """
    session_token = request.cookies.get(SESSION_COOKIE)
    if session_token:
        return SessionCredentials(token=session_token)

    header = request.headers.get("Authorization", "").strip()
    scheme, _, value = header.partition(" ")
    if scheme.lower() == "bearer":
        header = value.strip()
    if header:
        return TokenCredentials(secret=header)

    return None


async def require_account(request: Request, auth_service: AuthService) -> AccountId:
    """Resolve the calling account.

    Raises:
        UnauthenticatedError: If the request is not authenticated
    """
    return await auth_service.resolve(read_credentials(request))
