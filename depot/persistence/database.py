"""Database engine and session management."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from depot.config import DatabaseSettings


def create_engine(settings: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async database engine.

    Every connection gets a server-side statement timeout so a stuck query
    fails fast instead of holding a pooled connection.

    Args:
        settings: Database settings
        echo: Log SQL statements

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        connect_args={
            "server_settings": {
                "statement_timeout": str(settings.statement_timeout_ms),
            },
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

