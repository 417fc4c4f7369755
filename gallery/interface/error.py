"""Mapping of domain and adapter errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from gallery.adapter.error import AdapterError
from gallery.domain.error import (
    CodeAllocationError,
    ConflictError,
    DomainError,
    InvitationAlreadyUsedError,
    InvitationEmailMismatchError,
    InvitationExpiredError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

# Checked in order; subclasses come before their bases
ERROR_STATUS: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (InvitationAlreadyUsedError, status.HTTP_400_BAD_REQUEST),
    (InvitationExpiredError, status.HTTP_400_BAD_REQUEST),
    (InvitationEmailMismatchError, status.HTTP_403_FORBIDDEN),
    (CodeAllocationError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (AdapterError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: Exception) -> int:
    """HTTP status for an error, 500 when unmapped."""
    for error_type, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _handle_error(request: Request, exc: Exception) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, error=str(exc), status=code
        )
    else:
        logfire.info(
            "Request rejected", path=request.url.path, error=str(exc), status=code
        )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


async def _handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logfire.warn("Constraint violation", path=request.url.path, error=str(exc.orig))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Conflicts with an existing record"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers that render errors as ``{"detail": message}``.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, _handle_error)
    app.add_exception_handler(AdapterError, _handle_error)
    app.add_exception_handler(IntegrityError, _handle_integrity_error)
