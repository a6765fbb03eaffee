"""Shared plumbing for PostgreSQL repositories."""

from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

import logfire

from depot.domain.error import ConflictError, InvalidInputError, TransientError

INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1
INT8_MAX = 2**63 - 1

_TRANSIENT_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,  # pool checkout
    TimeoutError,
)


def fits_int4(value: int) -> bool:
    """Whether a value can be bound to an INTEGER column."""
    return INT4_MIN <= value <= INT4_MAX


class PostgresRepository:
    """Base class for repositories backed by an AsyncSession.

    Statements go through ``_execute`` so storage failures reach the
    domain as ConflictError, InvalidInputError or TransientError instead
    of SQLAlchemy exceptions.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(
        self, stmt: Executable, conflict_message: str = "conflicting write"
    ) -> Result:
        try:
            return await self.session.execute(stmt)
        except sa_exc.IntegrityError as e:
            raise ConflictError(conflict_message) from e
        except sa_exc.DataError as e:
            logfire.warn(
                "Storage rejected value",
                repository=type(self).__name__,
                error=str(e),
            )
            raise InvalidInputError("value out of range") from e
        except _TRANSIENT_ERRORS as e:
            logfire.warn(
                "Storage operation failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise TransientError("storage unavailable, try again later") from e
