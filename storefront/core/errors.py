"""API error taxonomy and the FastAPI handlers that render it as JSON."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error!"


class ApiError(Exception):
    """Base class for failures reported to the client with a fixed status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_body(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationFailedError(ApiError):
    """Malformed, missing or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        message: str = "Bad request",
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        if self.errors:
            body["errors"] = self.errors
        return body


class UnauthorizedError(ApiError):
    """Missing, malformed or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(ApiError):
    """Authenticated, but the role or ownership check failed."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    """Identifier is malformed or does not resolve to a stored entity."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredentialsError(ApiError):
    """Login failure. The message never says which of email or password was wrong."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Incorrect email or password!") -> None:
        super().__init__(message)


def _field_name(loc: tuple[Any, ...]) -> str:
    """Drop the leading 'body'/'query'/'path' segment from a pydantic error location."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "body"


def validation_errors_from_pydantic(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into [{field, message}]."""
    return [
        {"field": _field_name(tuple(err.get("loc", ()))), "message": str(err.get("msg", ""))}
        for err in errors
    ]


async def _handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_body(),
        headers=exc.headers,
    )


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = ValidationFailedError(errors=validation_errors_from_pydantic(list(exc.errors())))
    return JSONResponse(status_code=error.status_code, content=error.to_body())


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": SERVER_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map the error taxonomy onto JSON responses."""
    app.add_exception_handler(ApiError, _handle_api_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
