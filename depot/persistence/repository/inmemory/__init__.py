"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .api_token import InMemoryApiTokenRepository
from .follow import InMemoryFollowRepository
from .package import InMemoryPackageRepository
from .version import InMemoryVersionRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryApiTokenRepository",
    "InMemoryFollowRepository",
    "InMemoryPackageRepository",
    "InMemoryVersionRepository",
]
