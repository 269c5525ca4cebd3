"""Fixtures for end-to-end API tests against in-memory persistence."""

from dataclasses import dataclass

import httpx
import pytest_asyncio

from blog.config import Settings
from blog.domain.model import Post, User
from blog.interface.api.app import create_app
from blog.persistence.repository.inmemory import InMemoryStore
from blog.util.di.container import setup_di
from blog.util.jwt import create_token
from tests.di import build_test_container


@dataclass
class Api:
    """HTTP client plus direct access to the data behind it."""

    client: httpx.AsyncClient
    store: InMemoryStore

    def auth(self, user: User, role: str = "user") -> dict[str, str]:
        """Cookie header authenticating as the given user."""
        token = create_token(str(user.id), user.username, Settings().auth, role=role)
        return {"Cookie": f"auth_token={token}"}

    def add(self, *records: User | Post) -> None:
        """Seed users and posts."""
        for record in records:
            table = self.store.users if isinstance(record, User) else self.store.posts
            table[record.id] = record


@pytest_asyncio.fixture
async def api():
    """Create app wired to a test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    store = await test_container.get(InMemoryStore)

    transport = httpx.ASGITransport(app=app_instance)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield Api(client=client, store=store)

    await test_container.close()
