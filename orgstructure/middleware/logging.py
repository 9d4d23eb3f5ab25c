"""
Request logging middleware for the org-structure service.

Binds the request to the structlog context so every entry logged while
handling it carries trace_id, method, path and client_ip.
"""
import time
from typing import Callable
from fastapi import Request, Response
from orgstructure.core.logging import get_logger, bind_request_context, clear_request_context

logger = get_logger(__name__)


async def logging_middleware(request: Request, call_next: Callable) -> Response:
    """Log request start and completion with its duration in milliseconds."""
    bind_request_context(
        trace_id=getattr(request.state, "trace_id", "unknown"),
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown",
    )
    logger.info("Request started", query_params=dict(request.query_params))

    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        # error_handler_middleware turns this into the response
        logger.error(
            "Request failed",
            error_type=type(exc).__name__,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        raise
    else:
        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response
    finally:
        clear_request_context()
