"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from inkwell.domain.error import (
    InvalidReferenceError,
    InvalidStateTransitionError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    ValidationError,
)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": str(exc), "fields": exc.fields}},
    )


async def _request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # loc is ("body", "author_name") or ("query", "post"); keep the field name
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    logfire.warn("Malformed request", path=request.url.path, fields=fields)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "message": "Invalid fields: " + ", ".join(fields),
                "fields": fields,
            }
        },
    )


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def _invalid_reference(
    request: Request, exc: InvalidReferenceError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def _invalid_transition(
    request: Request, exc: InvalidStateTransitionError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def _not_authorized(request: Request, exc: NotAuthorizedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": "Moderator role required"},
    )


async def _storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logfire.error("Storage failure", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unexpected error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers that turn domain errors into responses.

    Storage and unexpected errors are logged and answered with a generic
    message; their details never reach the client.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(InvalidReferenceError, _invalid_reference)
    app.add_exception_handler(InvalidStateTransitionError, _invalid_transition)
    app.add_exception_handler(NotAuthorizedError, _not_authorized)
    app.add_exception_handler(StorageError, _storage_error)
    app.add_exception_handler(Exception, _unexpected_error)
