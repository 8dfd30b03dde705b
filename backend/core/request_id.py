# backend/core/request_id.py
import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from typing import Callable

HEADER = "X-Request-ID"

logger = logging.getLogger("http")


class RequestIDMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, header_name: str = HEADER):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request, call_next: Callable):
        req_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        # stash on request state so handlers can echo it
        request.state.request_id = req_id
        started = time.perf_counter()
        response = await call_next(request)
        response.headers[self.header_name] = req_id
        logger.info(
            "%s %s -> %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "request_id": req_id,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
