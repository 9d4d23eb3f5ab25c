"""
Error handling middleware for the org-structure service.

Converts exceptions escaping the routers into the JSON error envelope
``{"error": {code, message, details, trace_id}}``.
"""

import uuid
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

logger = get_logger(__name__)

TRACE_HEADER = "X-Trace-ID"


def error_payload(code: str, message: str, trace_id: str, details: dict | None = None) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "trace_id": trace_id,
        }
    }


async def error_handler_middleware(request: Request, call_next: Callable) -> Response:
    """
    Assign a trace ID to the request and turn failures into error responses.

    AppException subclasses keep their own status code and error code;
    client errors are logged as warnings and server errors as errors.
    Anything else becomes a 500 INTERNAL_SERVER_ERROR.
    """
    trace_id = request.headers.get(TRACE_HEADER) or str(uuid.uuid4())
    request.state.trace_id = trace_id

    try:
        response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        return response

    except AppException as exc:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application exception occurred",
            error_code=exc.error_code,
            error_message=exc.message,
            status_code=exc.status_code,
            trace_id=trace_id,
            path=request.url.path,
            method=request.method,
            details=exc.details,
        )

        content = exc.to_dict()
        content["error"]["trace_id"] = trace_id
        return JSONResponse(
            status_code=exc.status_code, content=content, headers={TRACE_HEADER: trace_id}
        )

    except Exception as exc:
        logger.error(
            "Unexpected exception occurred",
            error_type=type(exc).__name__,
            error_message=str(exc),
            trace_id=trace_id,
            path=request.url.path,
            method=request.method,
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content=error_payload("INTERNAL_SERVER_ERROR", "An unexpected error occurred", trace_id),
            headers={TRACE_HEADER: trace_id},
        )
