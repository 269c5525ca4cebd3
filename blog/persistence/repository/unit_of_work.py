"""PostgreSQL unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.repository import UnitOfWork
from blog.persistence.error import TransactionError


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work backed by a savepoint on the request's session.

    Repositories of a request share one session, so everything they write
    inside ``transaction()`` commits or rolls back together.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Run the block in a savepoint, rolling it back if the block raises.

        Raises:
            TransactionError: If the database rejects a statement in the block
        """
        try:
            async with self.session.begin_nested():
                yield
        except SQLAlchemyError as e:
            logfire.error("Transaction rolled back", error=str(e))
            raise TransactionError(str(e)) from e
