"""Shared pagination helpers for listing use cases."""

from blog.config import PaginationSettings


def resolve_limit(limit: int | None, settings: PaginationSettings) -> int:
    """Apply the default page size and cap it at the configured maximum."""
    if limit is None:
        return settings.default_page_size
    return min(limit, settings.max_page_size)
