"""
Where: echobin/server/middleware.py
What: HTTP middleware for trailing-slash normalization, timing and access logging.
Why: Isolate cross-cutting request concerns from app assembly.
"""

import logging
import time

from fastapi import Request
from fastapi.responses import RedirectResponse

from echobin.common.core.request_context import clear_request_id, generate_request_id

from .core.exceptions import global_exception_handler

logger = logging.getLogger("echobin.access")


async def trailing_slash_middleware(request: Request, call_next):
    """Redirect `/path/` to `/path` permanently without invoking the handler."""
    path = request.url.path
    if path != "/" and path.endswith("/"):
        # Collapse leading slashes so the target never becomes protocol-relative
        location = "/" + path[:-1].lstrip("/")
        if request.url.query:
            location = f"{location}?{request.url.query}"
        return RedirectResponse(location, status_code=301)

    return await call_next(request)


async def response_time_middleware(request: Request, call_next):
    """Middleware for response timing and structured access logging."""
    start_time = time.perf_counter()
    req_id = generate_request_id()

    try:
        try:
            response = await call_next(request)
        except Exception as exc:
            response = await global_exception_handler(request, exc)

        process_time_ms = (time.perf_counter() - start_time) * 1000
        header_name = request.app.state.config.RESPONSE_TIME_HEADER
        response.headers[header_name] = f"{process_time_ms:.2f}ms"

        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": req_id,
                "method": request.method,
                "path": request.url.path,
                "query_params": str(request.query_params),
                "status": response.status_code,
                "latency_ms": round(process_time_ms, 2),
                "user_agent": request.headers.get("user-agent"),
                "client_ip": request.client.host if request.client else None,
            },
        )

        return response
    finally:
        clear_request_id()
