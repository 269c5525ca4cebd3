"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .post import InMemoryPostRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
