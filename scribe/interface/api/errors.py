"""HTTP mapping of application errors.

Every error leaves the API as ``{"error": kind, "message": text, "cause": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from scribe.adapter.error import AdapterError, EmailDeliveryError, UploadError
from scribe.domain.error import (
    AlreadyExistsError,
    AuthenticationError,
    DatabaseError,
    DomainError,
    InvalidIdentifierError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from scribe.util.logging import get_logger

logger = get_logger(__name__)


def error_response(
    status_code: int,
    kind: str,
    message: str,
    cause: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope."""
    if status_code == 401:
        headers = {**(headers or {}), "WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={"error": kind, "message": message, "cause": cause},
        headers=headers,
    )


# Most specific first; the first matching class wins
_DOMAIN_ERRORS: list[tuple[type[DomainError], int, str]] = [
    (InvalidIdentifierError, status.HTTP_400_BAD_REQUEST, "invalid_identifier"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "validation_error"),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN, "forbidden"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (AlreadyExistsError, status.HTTP_409_CONFLICT, "already_exists"),
]

_HTTP_KINDS = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    if isinstance(exc, AuthenticationError):
        logger.info(f"Authentication failed: {exc.kind.value} {request.url.path}")
        return error_response(status.HTTP_401_UNAUTHORIZED, exc.kind.value, str(exc))

    if isinstance(exc, DatabaseError):
        logger.error(f"Database error on {request.url.path}: {exc} ({exc.cause})")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "database_error",
            "Database operation failed",
            exc.cause,
        )

    for error_type, status_code, kind in _DOMAIN_ERRORS:
        if isinstance(exc, error_type):
            return error_response(status_code, kind, str(exc))

    logger.error(f"Unmapped domain error on {request.url.path}: {exc!r}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal error"
    )


async def handle_adapter_error(request: Request, exc: AdapterError) -> JSONResponse:
    logger.error(f"Adapter error on {request.url.path}: {exc} ({exc.cause})")
    if isinstance(exc, UploadError):
        kind = "upload_error"
    elif isinstance(exc, EmailDeliveryError):
        kind = "email_error"
    else:
        kind = "internal_error"
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, kind, str(exc), exc.cause
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies and parameters."""
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "validation_error",
        "Request validation failed",
        "; ".join(_describe(err) for err in exc.errors()),
    )


async def handle_model_validation_error(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Values rejected by a use case request or a domain model."""
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "validation_error",
        "Invalid value",
        "; ".join(_describe(err) for err in exc.errors()),
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework errors such as unknown paths and unsupported methods."""
    kind = _HTTP_KINDS.get(exc.status_code, "http_error")
    return error_response(
        exc.status_code, kind, str(exc.detail), headers=getattr(exc, "headers", None)
    )


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(AdapterError, handle_adapter_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PydanticValidationError, handle_model_validation_error)
