"""Domain value objects for Depot."""

from depot.domain.value.identifiers import (
    AccountId,
    ApiTokenId,
    PackageId,
    VersionId,
)
from depot.domain.value.types import (
    Credentials,
    Login,
    ProviderIdentity,
    SessionCredentials,
    TokenCredentials,
)

__all__ = [
    # Identifiers
    "AccountId",
    "ApiTokenId",
    "PackageId",
    "VersionId",
    # Types
    "Credentials",
    "Login",
    "ProviderIdentity",
    "SessionCredentials",
    "TokenCredentials",
]
