"""End-to-end tests for post deletion and health endpoints."""

from uuid import uuid4

import pytest

from tests.conftest import make_post, make_user


class TestDeletePost:
    """DELETE /posts/{post_id}"""

    @pytest.mark.asyncio
    async def test_cascade_delete(self, api):
        # Arrange
        author = make_user("author")
        fan = make_user("fan")
        post = make_post(author_id=author.id)
        api.add(author, fan, post)
        created = await api.client.post(
            f"/posts/{post.id}/comments",
            json={"content": "First"},
            headers=api.auth(fan),
        )
        comment_id = created.json()["comment_id"]
        await api.client.post(f"/posts/{post.id}/like", headers=api.auth(fan))
        await api.client.post(f"/comments/{comment_id}/like", headers=api.auth(fan))

        # Act
        response = await api.client.delete(
            f"/posts/{post.id}", headers=api.auth(author)
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "post_id": str(post.id),
            "message": "Post deleted successfully",
            "post_likes_deleted": 1,
            "comments_deleted": 1,
            "comment_likes_deleted": 1,
        }
        assert api.store.posts == {}
        assert api.store.comments == {}
        assert api.store.likes == {}

    @pytest.mark.asyncio
    async def test_only_author_may_delete(self, api):
        author = make_user("author")
        other = make_user("other")
        post = make_post(author_id=author.id)
        api.add(author, other, post)

        response = await api.client.delete(
            f"/posts/{post.id}", headers=api.auth(other)
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "You can only delete your own posts"
        assert post.id in api.store.posts

    @pytest.mark.asyncio
    async def test_unknown_post_returns_404(self, api):
        user = make_user()
        api.add(user)

        response = await api.client.delete(f"/posts/{uuid4()}", headers=api.auth(user))

        assert response.status_code == 404


class TestHealth:
    """GET /health"""

    @pytest.mark.asyncio
    async def test_health(self, api):
        response = await api.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
