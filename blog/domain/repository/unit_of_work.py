"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Transaction boundary spanning several repositories.

    Every repository write performed inside ``transaction()`` is committed
    when the block exits cleanly and rolled back if it raises.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction.

        Usage:
            async with unit_of_work.transaction():
                ...
        """
        pass
