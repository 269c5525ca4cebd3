"""Mapping of domain and persistence errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blog.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)
from blog.persistence.error import TransactionError


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    # BusinessRuleViolationError, ValidationError
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as a JSON error response."""
    assert isinstance(exc, DomainError)
    status_code = status_for(exc)
    logfire.info(
        "Domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=status_code,
        error=str(exc),
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def transaction_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a failed transaction as a 500 without leaking database details."""
    logfire.error("Transaction failed", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Operation failed, no changes were made"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(TransactionError, transaction_error_handler)
