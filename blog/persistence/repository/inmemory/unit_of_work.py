"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from blog.domain.repository.unit_of_work import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Snapshot-based unit of work.

    The store is copied when the transaction opens and restored if the
    block raises, so a failed block leaves no partial writes. Restoring
    replaces whole tables, so the store assumes one writer at a time: writes
    made by other coroutines while a block is open are lost on rollback.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Run the block, restoring the store if it raises."""
        snapshot = self._store.snapshot()
        try:
            yield
        except BaseException:
            self._store.restore(snapshot)
            raise
