"""Domain value objects for Depot.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules close to the data they guard.
"""

from typing import Literal, Union

from pydantic import Field, field_validator

from depot.domain.value.common import RootValueObject, ValueObject


class Login(RootValueObject[str]):
    """Display handle reported by the identity provider.

    Logins are not unique over time: GitHub lets users rename, and a freed
    login can be claimed by someone else.
    """

    @field_validator("root")
    @classmethod
    def validate_login(cls, v: str) -> str:
        """Validate login is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Login must be 1-255 characters")
        return v


class ProviderIdentity(ValueObject):
    """Verified result of an identity-provider login.

    Produced by the OAuth adapter once the handshake has succeeded.
    The external id is the permanent key; every other field may change
    between logins.
    """

    external_id: int
    login: Login
    email: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    access_token: str


class SessionCredentials(ValueObject):
    """Caller presented a session token (cookie-backed JWT)."""

    kind: Literal["session"] = "session"
    token: str = Field(min_length=1)


class TokenCredentials(ValueObject):
    """Caller presented a long-lived API token."""

    kind: Literal["token"] = "token"
    secret: str = Field(min_length=1)


Credentials = Union[SessionCredentials, TokenCredentials]
