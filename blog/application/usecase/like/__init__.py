"""Like use cases."""

from .like import LikeRequest, LikeResponse, LikeUseCase, UnlikeUseCase
from .list_likers import (
    GetLikeStatusUseCase,
    LikerItem,
    LikeStatusRequest,
    ListLikersRequest,
    ListLikersResponse,
    ListLikersUseCase,
)

__all__ = [
    "GetLikeStatusUseCase",
    "LikeRequest",
    "LikeResponse",
    "LikeStatusRequest",
    "LikeUseCase",
    "LikerItem",
    "ListLikersRequest",
    "ListLikersResponse",
    "ListLikersUseCase",
    "UnlikeUseCase",
]
