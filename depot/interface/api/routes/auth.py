"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Request, Response
from pydantic import BaseModel

from depot.adapter.error import ProviderError
from depot.application.usecase.auth import (
    GetAuthorizeUrlUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
)
from depot.application.usecase.auth.get_authorize_url import (
    GetAuthorizeUrlRequest,
    GetAuthorizeUrlResponse,
)
from depot.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from depot.application.usecase.auth.login import LoginRequest
from depot.application.view import AccountView
from depot.config import Settings
from depot.domain.error import DomainError
from depot.domain.service import AuthService
from depot.interface.api.credentials import SESSION_COOKIE, require_account
from depot.interface.error import to_http_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)

STATE_COOKIE = "oauth_state"
STATE_COOKIE_MAX_AGE = 10 * 60


class AuthorizeResponse(BaseModel):
    """Private view of the account that just logged in."""

    user: AccountView


class LogoutResponse(BaseModel):
    ok: bool = True


def _secure_cookies(settings: Settings) -> bool:
    return settings.environment in ("staging", "production")


@router.get("/authorize_url", response_model=GetAuthorizeUrlResponse)
async def authorize_url(
    response: Response,
    use_case: FromDishka[GetAuthorizeUrlUseCase],
    settings: FromDishka[Settings],
) -> GetAuthorizeUrlResponse:
    """Start a GitHub login.

    Returns the GitHub URL to send the browser to and remembers the
    generated state in a short-lived cookie for the callback to check.

    Example:
        GET /authorize_url

        {"url": "https://github.com/login/oauth/authorize?...&state=ab12",
         "state": "ab12"}
    """
    result = await use_case.execute(GetAuthorizeUrlRequest())
    response.set_cookie(
        key=STATE_COOKIE,
        value=result.state,
        httponly=True,
        secure=_secure_cookies(settings),
        samesite="lax",
        max_age=STATE_COOKIE_MAX_AGE,
        path="/",
    )
    return result


@router.get("/authorize", response_model=AuthorizeResponse)
async def authorize(
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str = "",
    state: str = "",
    oauth_state: str | None = Cookie(default=None),
) -> AuthorizeResponse:
    """Complete a GitHub login.

    Checks the state, reconciles the GitHub identity into an account and
    sets the session cookie.

    Raises:
        HTTPException: 400 on state mismatch, 502 if GitHub rejects the code
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(code=code, state=state, expected_state=oauth_state)
        )
    except (DomainError, ProviderError) as e:
        logger.warning("Login failed: %s", e)
        raise to_http_error(e) from e

    response.delete_cookie(STATE_COOKIE, path="/")
    response.set_cookie(
        key=SESSION_COOKIE,
        value=result.token,
        httponly=True,
        secure=_secure_cookies(settings),
        samesite="lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        path="/",
    )
    logger.info("Login successful for account %s", result.user.id)
    return AuthorizeResponse(user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the session cookie."""
    response.delete_cookie(key=SESSION_COOKIE, path="/")
    return LogoutResponse()


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[GetCurrentUserUseCase],
) -> GetCurrentUserResponse:
    """Get the authenticated account, email included.

    Raises:
        HTTPException: 403 if not authenticated
    """
    try:
        account_id = await require_account(request, auth_service)
        return await use_case.execute(GetCurrentUserRequest(account_id=account_id))
    except DomainError as e:
        raise to_http_error(e) from e
