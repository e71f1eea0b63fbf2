"""
Centralized error handlers for FastAPI.

Maps domain errors and request parsing failures to HTTP responses:

- field rule violations   -> 400, field name to message map
- unreadable request body -> 400, error/message pair
- bad page or sort        -> 400, error/message pair
- anything else           -> 500, error/message pair, security headers

A missing employee is not an exception; routes answer 404 themselves.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.domain.employees.errors import (
    EmployeeDomainError,
    EmployeeValidationError,
    InvalidPageRequestError,
    InvalidSortError,
)
from app.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

MALFORMED_REQUEST_MESSAGE = "Please provide the correct data type for each field."


def _error_response(
    status_code: int,
    error: str,
    message: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if message:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _describe_parse_errors(exc: RequestValidationError) -> str:
    """Summarize parsing errors as ``location: reason`` pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Malformed request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(EmployeeValidationError)
    async def handle_employee_validation(
        _request: Request, exc: EmployeeValidationError
    ) -> JSONResponse:
        """Return every violated field with its message."""
        logger.warning("Employee payload rejected: %s", ", ".join(sorted(exc.errors)))
        return JSONResponse(status_code=HTTP_400, content=exc.errors)

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_request(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies or parameters that cannot be read into the expected types."""
        detail = _describe_parse_errors(exc)
        logger.warning("Malformed request: %s", detail)
        return _error_response(HTTP_400, detail, MALFORMED_REQUEST_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Give undecodable bodies the same 400 shape as mistyped ones.

        Other statuses (unknown route, wrong method) keep the stock response.
        """
        if exc.status_code != HTTP_400:
            return await http_exception_handler(request, exc)
        logger.warning("Unreadable request body: %s", exc.detail)
        return _error_response(HTTP_400, str(exc.detail), MALFORMED_REQUEST_MESSAGE)

    @app.exception_handler(InvalidPageRequestError)
    async def handle_invalid_page_request(
        _request: Request, exc: InvalidPageRequestError
    ) -> JSONResponse:
        logger.warning("Invalid page request: page=%d, size=%d", exc.page, exc.size)
        return _error_response(HTTP_400, "Invalid page request", exc.message)

    @app.exception_handler(InvalidSortError)
    async def handle_invalid_sort(
        _request: Request, exc: InvalidSortError
    ) -> JSONResponse:
        logger.warning("Invalid sort: %s", exc.sort)
        return _error_response(HTTP_400, "Invalid sort", exc.message)

    @app.exception_handler(EmployeeDomainError)
    async def handle_employee_domain(
        _request: Request, exc: EmployeeDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled employee domain errors."""
        logger.error("Unhandled employee domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors such as an unreachable database.

        Only the exception message is returned; the traceback goes to the log.
        An exception without a message is reported by its class name.
        This handler runs outside the middleware stack, so it sets the
        security headers itself.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        message = str(exc) or type(exc).__name__
        return _error_response(
            HTTP_500, "Internal server error", message, headers=SECURE_HEADERS
        )
