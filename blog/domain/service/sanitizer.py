"""Rich-text sanitization for user supplied content."""

import nh3

from .base import Service

ALLOWED_TAGS = {"b", "i", "em", "strong", "a", "code", "pre"}
ALLOWED_ATTRIBUTES = {"a": {"href", "target", "rel"}}


class ContentSanitizer(Service):
    """Allow-list HTML sanitizer.

    Keeps basic inline formatting and links; every other tag is stripped
    (its text is kept) and every other attribute is dropped.
    """

    def __init__(
        self,
        tags: set[str] | None = None,
        attributes: dict[str, set[str]] | None = None,
    ) -> None:
        self.tags = tags if tags is not None else ALLOWED_TAGS
        self.attributes = attributes if attributes is not None else ALLOWED_ATTRIBUTES

    def sanitize(self, html: str) -> str:
        """Sanitize HTML and trim surrounding whitespace.

        Args:
            html: Untrusted HTML fragment

        Returns:
            Sanitized fragment (may be empty)
        """
        cleaned = nh3.clean(
            html,
            tags=self.tags,
            attributes=self.attributes,
            # rel is an allowed attribute, so nh3 must not manage it itself
            link_rel=None,
        )
        return cleaned.strip()
