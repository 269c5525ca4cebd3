#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then hand over to uvicorn."""
    settings = Settings()

    # Configure Logfire before the app module is imported by uvicorn
    configure_logfire(settings)

    logfire.info(
        "Starting blog engagement API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "blog.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
