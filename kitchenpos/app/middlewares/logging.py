import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("kitchenpos.http")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Emit one inbound and one outbound log line per request."""

    async def dispatch(self, request: Request, call_next):
        route = request.url.path
        logger.info(
            "request", extra={"route": route, "method": request.method}
        )
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        status = response.status_code
        log_fn = logger.error if status >= 500 else logger.info
        log_fn(
            "response",
            extra={
                "route": route,
                "method": request.method,
                "status": status,
                "latency_ms": latency_ms,
            },
        )
        return response
