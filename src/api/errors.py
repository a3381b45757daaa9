"""Translate exceptions into the uniform error body.

Every error response looks like {"success": false, "code": ..., "message": ...}.
Services never touch the transport; this module is the only place that
decides status codes.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models import ErrorResponse
from domain.model.errors import (
    ChildNotFoundError,
    DomainError,
    DuplicateError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    PasswordHashingError,
    PermissionDeniedError,
    RepositoryError,
    UnauthorizedError,
    UserNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"

EXCEPTION_MAPPING: dict[type[DomainError], tuple[int, str]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    InvalidCredentialsError: (status.HTTP_401_UNAUTHORIZED, "INVALID_CREDENTIALS"),
    InvalidTokenError: (status.HTTP_401_UNAUTHORIZED, "INVALID_TOKEN"),
    UnauthorizedError: (status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED"),
    PermissionDeniedError: (status.HTTP_403_FORBIDDEN, "FORBIDDEN"),
    UserNotFoundError: (status.HTTP_404_NOT_FOUND, "USER_NOT_FOUND"),
    ChildNotFoundError: (status.HTTP_404_NOT_FOUND, "CHILD_NOT_FOUND"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    EmailAlreadyExistsError: (status.HTTP_409_CONFLICT, "EMAIL_ALREADY_EXISTS"),
    DuplicateError: (status.HTTP_409_CONFLICT, "CONFLICT"),
    PasswordHashingError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"),
    RepositoryError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"),
}

STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    503: "SERVICE_UNAVAILABLE",
}


def resolve_error(exc: DomainError) -> tuple[int, str]:
    """Status and code for a domain error, using its closest mapped base class."""
    for cls in type(exc).__mro__:
        if cls in EXCEPTION_MAPPING:
            return EXCEPTION_MAPPING[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


def error_response(status_code: int, code: str, message: str, headers: dict | None = None) -> JSONResponse:
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer", **(headers or {})}
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=code, message=message).model_dump(),
        headers=headers,
    )


def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code, code = resolve_error(exc)
    if status_code >= 500:
        logger.error("Request failed", exc_info=exc, extra={"path": request.url.path, "code": code})
        return error_response(status_code, code, INTERNAL_ERROR_MESSAGE)
    return error_response(status_code, code, str(exc))


def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return error_response(status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "; ".join(problems) or "Invalid request")


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = STATUS_CODES.get(exc.status_code, "INTERNAL_ERROR" if exc.status_code >= 500 else "ERROR")
    return error_response(exc.status_code, code, str(exc.detail), headers=exc.headers)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", exc_info=exc, extra={"path": request.url.path})
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
