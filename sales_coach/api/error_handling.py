"""
API error handling utilities.

A decorator maps domain exceptions raised inside endpoints to ApiError,
and the exception handlers registered on the app render ApiError and
request-parsing failures as the JSON error bodies clients expect:

    400  {"error": "<validation message>"}
    500  {"error": "Internal Server Error", "message": "...", "stack": "..."}

"stack" is only included when verbose diagnostics (DEBUG) are on.
"""

import functools
import logging
import traceback
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sales_coach.core.exceptions import ValidationError
from sales_coach.models.common import ErrorResponse
from sales_coach.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_SERVER_ERROR = "Internal Server Error"
INVALID_REQUEST_BODY = "Invalid request body"


class ApiError(Exception):
    """Endpoint failure carrying the HTTP status and the original cause."""

    def __init__(self, status_code: int, cause: Exception) -> None:
        self.status_code = status_code
        self.cause = cause
        super().__init__(str(cause))


def handle_api_errors(func: F) -> F:
    """
    Decorator to transform endpoint errors into ApiError.

    ValidationError (including EmptyConversationError) becomes a 400;
    anything else is logged and becomes a 500.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ValidationError as e:
            logger.warning(
                "Invalid request",
                extra={"endpoint": func.__name__, "error": e.message, **e.details},
            )
            raise ApiError(status.HTTP_400_BAD_REQUEST, e) from e

        except Exception as e:
            log_exception_with_context(logger, "Unexpected failure in endpoint", e, endpoint=func.__name__)
            raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, e) from e

    return wrapper  # type: ignore


def build_error_body(error: ApiError, debug: bool = False) -> dict[str, Any]:
    """Render the response body for an ApiError."""
    cause = error.cause
    if error.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = cause.message if isinstance(cause, ValidationError) else str(cause)
        return ErrorResponse(error=message).model_dump(exclude_none=True)

    stack = None
    if debug:
        stack = "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))
    return ErrorResponse(error=INTERNAL_SERVER_ERROR, message=str(cause), stack=stack).model_dump(
        exclude_none=True
    )


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Install ApiError and request-body handlers on the app."""

    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=build_error_body(exc, debug=debug))

    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(
            "Malformed request body",
            extra={"path": request.url.path, "error_count": len(exc.errors())},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=INVALID_REQUEST_BODY).model_dump(exclude_none=True),
        )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
