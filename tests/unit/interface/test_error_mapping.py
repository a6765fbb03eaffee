"""Unit tests for domain error to HTTP translation."""

import pytest

from depot.adapter.github import GitHubOAuthError
from depot.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    TransientError,
    UnauthenticatedError,
)
from depot.interface.error import to_http_error


class TestToHttpError:
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (NotFoundError("Package", "serde"), 404),
            (InvalidInputError("empty email rejected"), 400),
            (ForbiddenError("current user does not match requested user"), 403),
            (UnauthenticatedError(), 403),
            (ConflictError("api token secret in use"), 409),
            (TransientError("storage unavailable, try again later"), 503),
            (GitHubOAuthError("Authorization code rejected"), 502),
        ],
    )
    def test_status_codes(self, error, status_code):
        http_error = to_http_error(error)

        assert http_error.status_code == status_code
        assert http_error.detail == str(error)
