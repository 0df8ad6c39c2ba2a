"""
HTTP observability middleware.

RequestLoggingMiddleware writes one line when a request starts and one
when it finishes (status and latency). CorrelationMiddleware binds the
request's correlation ID and echoes it in the response headers.

Dependencies: starlette, sales_coach.observability
System role: Per-request logging and tracing
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from sales_coach.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status code and latency of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        request_info = {
            "method": request.method,
            "path": request.url.path,
            "client_host": request.client.host if request.client else None,
        }
        logger.info(f"{__name__}:dispatch - {request.method} {request.url.path}", extra=request_info)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{__name__}:dispatch - {request.method} {request.url.path} raised {type(e).__name__}",
                extra={**request_info, "process_time_ms": _elapsed_ms(started)},
            )
            raise

        logger.info(
            f"{__name__}:dispatch - {request.method} {request.url.path} -> {response.status_code}",
            extra={
                **request_info,
                "status_code": response.status_code,
                "process_time_ms": _elapsed_ms(started),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind X-Correlation-ID for the duration of a request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
