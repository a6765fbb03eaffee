"""Mock persistence providers for testing."""

from dishka import Scope, provide

from depot.domain.repository import (
    AccountRepository,
    ApiTokenRepository,
    FollowRepository,
    PackageRepository,
    VersionRepository,
)
from depot.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryApiTokenRepository,
    InMemoryFollowRepository,
    InMemoryPackageRepository,
    InMemoryVersionRepository,
)
from depot.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that data written in one request is
    visible to the next, as it would be in a database. Every test builds
    its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_account_repository(self) -> AccountRepository:
        return InMemoryAccountRepository()

    @provide
    def get_api_token_repository(self) -> ApiTokenRepository:
        return InMemoryApiTokenRepository()

    @provide
    def get_follow_repository(self) -> FollowRepository:
        return InMemoryFollowRepository()

    @provide
    def get_package_repository(self) -> PackageRepository:
        return InMemoryPackageRepository()

    @provide
    def get_version_repository(self) -> VersionRepository:
        return InMemoryVersionRepository()
