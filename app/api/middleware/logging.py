# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the service: what was asked for, how long the answer
# took, and whether it failed. Each request gets a tracking number echoed back to the caller.
# 🧪 Purpose (Technical Summary):
# Request logging middleware emitting structured start/finish records with timing, binding a
# request ID to the logging ContextVar and returning it in the X-Request-ID header.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils.logging, uuid, time
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration), app.main exception handlers (read request.state.request_id)

import time
import uuid
from typing import Iterable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Features:
    - Request ID propagation (incoming header reused, otherwise generated)
    - Request/response timing
    - Slow request warnings
    """

    def __init__(
        self,
        app: ASGIApp,
        excluded_paths: Optional[Iterable[str]] = None,
        slow_request_threshold: float = 2.0,
    ):
        super().__init__(app)
        self.excluded_paths = set(excluded_paths or ("/api/v1/health",))
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)
        token = request_id_var.set(request_id)
        start_time = time.time()
        log_enabled = request.url.path not in self.excluded_paths

        if log_enabled:
            logger.info(
                f"{request.method} {request.url.path}",
                event_type="http_request",
                method=request.method,
                path=request.url.path,
                client=request.client.host if request.client else None,
            )

        try:
            response = await call_next(request)
        except Exception as e:
            processing_time = time.time() - start_time
            logger.error(
                f"{request.method} {request.url.path} failed after {processing_time:.3f}s: {e}",
                event_type="http_error",
                method=request.method,
                path=request.url.path,
                error_type=type(e).__name__,
            )
            raise
        finally:
            request_id_var.reset(token)

        processing_time = time.time() - start_time
        if log_enabled:
            self._log_response(request, response, processing_time)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _log_response(self, request: Request, response: Response, processing_time: float) -> None:
        fields = {
            "event_type": "http_response",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "processing_time_ms": round(processing_time * 1000, 2),
        }
        message = f"{request.method} {request.url.path} -> {response.status_code} in {processing_time:.3f}s"

        if response.status_code >= 500:
            logger.error(message, **fields)
        elif response.status_code >= 400 or processing_time > self.slow_request_threshold:
            logger.warning(message, **fields)
        else:
            logger.info(message, **fields)
