"""Domain model entities for Depot."""

from depot.domain.model.account import Account
from depot.domain.model.api_token import ApiToken
from depot.domain.model.follow import Follow
from depot.domain.model.package import Package
from depot.domain.model.version import Version

__all__ = [
    "Account",
    "ApiToken",
    "Follow",
    "Package",
    "Version",
]
