"""
Per-request context: correlation id, view shape and a store query tally.

The id is taken from `X-Request-ID` when the client sends one and echoed on
the response. When the request finishes a single "Request served" line is
logged with the status, duration and number of store round trips.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from listshare.engines.dashboard.view_selector import (
    PARTIAL_REQUEST_HEADER,
    is_partial_request,
)
from listshare.logging_config import RequestContext, get_logger, request_context_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_MS = 1000


class RequestContextMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        partial = is_partial_request(request.headers.get(PARTIAL_REQUEST_HEADER))
        ctx = RequestContext(
            request_id=request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex,
            view="fragment" if partial else "page",
        )
        request.state.request_id = ctx.request_id
        token = request_context_var.set(ctx)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = ctx.request_id

            duration_ms = round((time.perf_counter() - started) * 1000, 1)
            fields = {
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "view": ctx.view,
                "store_round_trips": ctx.store_round_trips,
                "duration_ms": duration_ms,
            }
            if duration_ms > SLOW_REQUEST_MS:
                logger.warning("Slow %s request", ctx.view, extra=fields)
            else:
                logger.info("Request served", extra=fields)
            return response
        finally:
            request_context_var.reset(token)
