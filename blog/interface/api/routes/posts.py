"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from blog.application.usecase.post import (
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
)
from blog.domain.service import JWTService
from blog.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post with all of its comments and likes.

    Only the post author can delete. Either everything is removed or
    nothing is.

    Args:
        post_id: Post UUID
        delete_post_use_case: Delete post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Summary of the removed records
    """
    user_id = require_user_id(jwt_service, auth_token, "delete posts")
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=str(user_id))
    )
