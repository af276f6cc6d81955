"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent error
format. Status codes are decided here and nowhere else.

Error Response Format:
    {
        "error": {
            "code": "MACHINE_READABLE_ERROR_CODE",
            "message": "Human-readable error message",
            "timestamp": "2024-01-01T00:00:00Z"
        }
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userhub.domain.shared.exceptions import DomainException, ErrorCode
from userhub.domain.user.exceptions import InvalidInputError
from userhub.presentation.api.middleware import REQUEST_ID_HEADER
from userhub.presentation.api.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.DATABASE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.CONFIG_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Server-side failures are never echoed verbatim to clients
SAFE_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DATABASE_ERROR: "Database operation failed",
    ErrorCode.INTERNAL_ERROR: "Internal server error occurred",
    ErrorCode.CONFIG_ERROR: "Configuration error",
}


def _create_error_response(
    status_code: int,
    message: str,
    code: ErrorCode,
    request: Request | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    body = ErrorResponse(error=ErrorDetail(code=code.value, message=message))
    response = JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )
    request_id = getattr(request.state, "request_id", None) if request else None
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Malformed request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Malformed request")
    return f"{location}: {message}" if location else message


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = ERROR_CODE_TO_STATUS.get(
            exc.code,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Server error on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )
            message = SAFE_MESSAGES.get(exc.code, "Internal server error occurred")
        else:
            logger.warning(
                "Domain exception on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )
            message = exc.message

        return _create_error_response(status_code, message, exc.code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report malformed payloads, query strings and path ids as INVALID_INPUT."""
        error = InvalidInputError(_first_validation_message(exc))
        logger.warning(
            "Request validation failed on %s %s: %s",
            request.method,
            request.url.path,
            error.reason,
        )
        return _create_error_response(
            status.HTTP_400_BAD_REQUEST,
            error.message,
            error.code,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap routing errors (unknown path, wrong method) in the error format."""
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            code = ErrorCode.INTERNAL_ERROR
            message = SAFE_MESSAGES[code]
        else:
            code = ErrorCode.INVALID_INPUT
            message = str(exc.detail)
        logger.warning(
            "HTTP %d on %s %s: %s",
            exc.status_code,
            request.method,
            request.url.path,
            exc.detail,
        )
        return _create_error_response(
            exc.status_code,
            message,
            code,
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This handler runs outside the request middleware, so the request id
        header is restored from ``request.state`` here.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            SAFE_MESSAGES[ErrorCode.INTERNAL_ERROR],
            ErrorCode.INTERNAL_ERROR,
            request=request,
        )
