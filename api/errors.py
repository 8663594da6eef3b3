"""
Error kinds and the error responder.

Every failure the API reports on purpose is an ``APIError`` tagged with one
member of the closed ``ErrorType`` enumeration. The kind carries the HTTP
status and a default message; handlers registered in ``api.main`` render it.
"""

from enum import Enum
from typing import Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.config import config
from api.models import ErrorResponse

logger = structlog.get_logger(__name__)


class ErrorType(Enum):
    """Error kinds with their HTTP status and default message."""
    VALIDATION_ERROR = (status.HTTP_400_BAD_REQUEST, "Invalid request")
    EMAIL_ALREADY_TAKEN = (status.HTTP_409_CONFLICT, "Email already taken")
    UNPROCESSABLE_ENTITY = (422, "Unprocessable entity")
    NOT_IMPLEMENTED = (status.HTTP_501_NOT_IMPLEMENTED, "Not implemented")
    SERVER_ERROR = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    def __init__(self, status_code: int, default_message: str):
        self.status_code = status_code
        self.default_message = default_message


class APIError(Exception):
    """An error of a known kind, rendered as a JSON error body."""

    def __init__(self, error_type: ErrorType, message: Optional[str] = None):
        self.error_type = error_type
        self.message = message or error_type.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.error_type.status_code

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error=self.error_type.name,
            message=self.message,
            status_code=self.status_code
        )


def error_responder(error_type: ErrorType, message: Optional[str] = None) -> APIError:
    """Build an APIError for the given kind; callers raise the result."""
    return APIError(error_type, message)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render a classified error."""
    logger.warning(
        "Request failed",
        path=request.url.path,
        method=request.method,
        error=exc.error_type.name,
        message=exc.message
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump()
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are reported as VALIDATION_ERROR."""
    errors = exc.errors()
    message = errors[0].get("msg", ErrorType.VALIDATION_ERROR.default_message) if errors else None
    return await api_error_handler(request, APIError(ErrorType.VALIDATION_ERROR, message))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unclassified exceptions, such as storage failures."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_class=type(exc).__name__,
        path=request.url.path,
        exc_info=exc
    )
    error_type = ErrorType.SERVER_ERROR
    return JSONResponse(
        status_code=error_type.status_code,
        content=ErrorResponse(
            error=error_type.name,
            message=error_type.default_message,
            detail=str(exc) if config.debug else None,
            status_code=error_type.status_code
        ).model_dump()
    )
