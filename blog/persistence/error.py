"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class TransactionError(PersistenceError):
    """Raised when a transaction fails at the database level and is rolled back."""

    pass
