"""PostgreSQL repository implementations."""

from depot.persistence.repository.account import PostgresAccountRepository
from depot.persistence.repository.api_token import PostgresApiTokenRepository
from depot.persistence.repository.follow import PostgresFollowRepository
from depot.persistence.repository.package import PostgresPackageRepository
from depot.persistence.repository.version import PostgresVersionRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresApiTokenRepository",
    "PostgresFollowRepository",
    "PostgresPackageRepository",
    "PostgresVersionRepository",
]
