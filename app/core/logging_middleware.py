"""Request logging middleware."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("scorecard.requests")

# Longest error body echoed into the log
MAX_LOGGED_BODY = 500


async def _drain_body(response: Response) -> bytes:
    """Consume a streaming response body."""
    body = b""
    async for chunk in response.body_iterator:  # type: ignore[attr-defined]
        body += chunk.encode("utf-8") if isinstance(chunk, str) else chunk
    return body


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with client, method, path, status, and duration.

    Scorecard requests can take several seconds while sessions are probed,
    so the duration is also returned in an ``X-Response-Time-Ms`` header.
    For 4xx/5xx responses the JSON error body is logged as well.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000

        status = response.status_code
        client = request.client.host if request.client else "-"
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        if status >= 400 and hasattr(response, "body_iterator"):
            body = await _drain_body(response)
            detail = body.decode("utf-8", errors="replace")
            if len(detail) > MAX_LOGGED_BODY:
                detail = detail[:MAX_LOGGED_BODY] + "..."

            log = logger.warning if status < 500 else logger.error
            log(
                "%s %s %s → %d (%.0fms) %s",
                client,
                request.method,
                target,
                status,
                duration_ms,
                detail,
            )
            # The body iterator is spent, so hand the client a rebuilt response
            response = Response(
                content=body,
                status_code=status,
                headers=dict(response.headers),
                media_type=response.media_type,
            )
        else:
            logger.info(
                "%s %s %s → %d (%.0fms)",
                client,
                request.method,
                target,
                status,
                duration_ms,
            )

        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.0f}"
        return response
