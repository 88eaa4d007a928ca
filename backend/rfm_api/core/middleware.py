"""Custom ASGI middleware used by the FastAPI app."""

from __future__ import annotations

import time
import uuid

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from rfm_api.core.config import settings
from rfm_api.core.logging import request_id_ctx_var


class RequestContextLogMiddleware(BaseHTTPMiddleware):
    """Tags each request with an ``X-Request-ID`` and logs its completion."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            status_code = response.status_code if response else 500
            log = logger.bind(
                method=request.method,
                path=request.url.path,
                status=status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            if status_code >= 500:
                log.warning("request_failed")
            else:
                log.info("request_completed")
            if response is not None:
                response.headers.setdefault("X-Request-ID", request_id)
            request_id_ctx_var.reset(token)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject payloads whose declared size exceeds ``MAX_UPLOAD_BYTES``."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > settings.MAX_UPLOAD_BYTES:
            return JSONResponse(
                status_code=413,
                content={"detail": "Request entity too large"},
            )
        return await call_next(request)
