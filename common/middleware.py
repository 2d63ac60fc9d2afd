"""
common.middleware
~~~~~~~~~~~~~~~~~
Structured JSON request-logging middleware powered by structlog.

Each request gets a ``request_id`` bound into structlog's context variables,
so service and error events logged while handling it carry the same id.
"""
import time
import uuid

import structlog

logger = structlog.get_logger(__name__)


class StructuredLoggingMiddleware:
    """
    Emits one ``http_request`` record per request/response cycle.

    Log record fields:
        request_id  – client supplied ``X-Request-ID`` or a fresh uuid4 hex
        method      – HTTP verb
        path        – URL path including query string
        status      – HTTP response status code (int)
        duration_ms – Round-trip duration in milliseconds (float, 2 dp)
    """

    header = "HTTP_X_REQUEST_ID"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.META.get(self.header) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.monotonic()
        try:
            response = self.get_response(request)
            duration_ms = round((time.monotonic() - start) * 1000, 2)
            logger.info(
                "http_request",
                method=request.method,
                path=request.get_full_path(),
                status=response.status_code,
                duration_ms=duration_ms,
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response["X-Request-ID"] = request_id
        return response
