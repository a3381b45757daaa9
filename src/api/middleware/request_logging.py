"""Per-request access logging."""

import logging
import time

from fastapi import Request

logger = logging.getLogger("api.access")


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.info("Request handled", extra={
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "durationMs": duration_ms,
    })
    return response
