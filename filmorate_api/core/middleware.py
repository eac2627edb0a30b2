import time
import logging
from http import HTTPStatus

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from filmorate_api.core.trace import set_trace_id

alog = logging.getLogger("access")

TRACE_HEADER = "X-Request-Id"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a trace id per request and write one access record for it."""

    async def dispatch(self, request: Request, call_next):
        trace_id = set_trace_id(request.headers.get(TRACE_HEADER))
        start = time.perf_counter()
        status = HTTPStatus.INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            alog.info(
                "access",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "query": str(request.url.query)
                    if request.url.query else "",
                    "status": int(status),
                    "latency_ms": int((time.perf_counter() - start) * 1000),
                    "client_ip": request.client.host
                    if request.client else None,
                },
            )
