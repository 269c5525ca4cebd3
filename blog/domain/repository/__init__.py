"""Repository interfaces for the blog engagement engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.like import LikeRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.unit_of_work import UnitOfWork
from blog.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
    "UnitOfWork",
]
