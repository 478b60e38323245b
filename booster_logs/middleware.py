from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import time
import uuid


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs start, completion and failure of each request under a short id.

    The id is taken from an incoming ``X-Request-ID`` header when present and
    is always echoed back on the response.
    """

    def __init__(self, app, logger):
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get("x-request-id") or str(uuid.uuid4())[:8]
        start = time.time()

        self.logger.info("request_started",
            req_id=req_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
            content_type=request.headers.get("content-type"),
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self.logger.error("request_failed", req_id=req_id, path=request.url.path, error=str(e))
            raise

        duration = time.time() - start
        self.logger.info("request_completed",
            req_id=req_id,
            status=response.status_code,
            duration_ms=round(duration * 1000, 2)
        )
        response.headers["X-Request-ID"] = req_id
        return response
