"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from depot.config import Settings
from depot.domain.repository import (
    AccountRepository,
    ApiTokenRepository,
    FollowRepository,
    PackageRepository,
    VersionRepository,
)
from depot.persistence.database import create_engine, create_session_factory
from depot.persistence.repository import (
    PostgresAccountRepository,
    PostgresApiTokenRepository,
    PostgresFollowRepository,
    PostgresPackageRepository,
    PostgresVersionRepository,
)
from depot.util.di.base import ProviderBase
from depot.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's session.

        Committed at the end of the request if no exception occurred,
        rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_api_token_repository(self, session: AsyncSession) -> ApiTokenRepository:
        return PostgresApiTokenRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_package_repository(self, session: AsyncSession) -> PackageRepository:
        return PostgresPackageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_version_repository(self, session: AsyncSession) -> VersionRepository:
        return PostgresVersionRepository(session)
