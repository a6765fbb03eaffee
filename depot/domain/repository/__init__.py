"""Repository interfaces for the Depot domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from depot.domain.repository.account import AccountRepository
from depot.domain.repository.api_token import ApiTokenRepository
from depot.domain.repository.follow import FollowRepository
from depot.domain.repository.package import PackageRepository
from depot.domain.repository.version import VersionRepository

__all__ = [
    "AccountRepository",
    "ApiTokenRepository",
    "FollowRepository",
    "PackageRepository",
    "VersionRepository",
]
