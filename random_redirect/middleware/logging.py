"""
Logging Middleware for Request/Response Logging

Logs one line per HTTP request:
    METHOD PATH STATUS_CODE PROCESS_TIME_MS IP:CLIENT_IP

Redirect responses also log their Location so the distribution of
weighted picks can be read back from the logs.
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("random_redirect")


def get_client_ip(request: Request) -> str:
    """
    Extract client IP address from request.

    Honors the first address in X-Forwarded-For when the service runs
    behind a proxy or load balancer.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(self, request: Request, call_next):
        client_ip = get_client_ip(request)
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        message = (
            f"{request.method} {request.url.path} "
            f"{response.status_code} {process_time*1000:.2f}ms "
            f"IP:{client_ip}"
        )
        location = response.headers.get("location")
        if location and 300 <= response.status_code < 400:
            message += f" -> {location}"
        logger.info(message)

        response.headers["X-Process-Time"] = str(process_time)
        return response


def add_logging_middleware(app):
    """Add logging middleware to FastAPI app."""
    app.add_middleware(LoggingMiddleware)
