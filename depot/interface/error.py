"""Translation of domain and adapter errors to HTTP responses."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from depot.adapter.error import ProviderError
from depot.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    TransientError,
    UnauthenticatedError,
)

# Order matters only for subclasses; these are all siblings
_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    # Registry clients expect 403 for missing credentials
    UnauthenticatedError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    TransientError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_error(error: DomainError | ProviderError) -> HTTPException:
    """Map a domain or provider error to an HTTPException.

    Args:
        error: Error raised below the interface layer

    Returns:
        HTTPException carrying the status and the error message
    """
    if isinstance(error, ProviderError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error))

    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )


def _error_body(detail: str) -> dict:
    return {"errors": [{"detail": detail}]}


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    detail = f"invalid {location}: {first.get('msg', 'bad request')}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(detail)
    )


def install_error_handlers(app: FastAPI) -> None:
    """Render every error as ``{"errors": [{"detail": ...}]}``."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
