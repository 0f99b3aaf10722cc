# =========================================================
# ERROR RESPONSES
# Uniform JSON bodies for errors raised outside the routers
# =========================================================

import logging
from datetime import datetime, timezone

from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

logger = logging.getLogger("librestock")

RATE_LIMIT_MESSAGE = (
    "Rate limit exceeded. Please slow down your requests and try again later."
)
RATE_LIMIT_HINT = (
    "Consider implementing exponential backoff or waiting before retrying."
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(
        f"Rate limit exceeded: {request.method} {request.url.path} ({exc.detail})"
    )

    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "statusCode": status.HTTP_429_TOO_MANY_REQUESTS,
            "error": "Too Many Requests",
            "message": RATE_LIMIT_MESSAGE,
            "path": request.url.path,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "hint": RATE_LIMIT_HINT,
        },
    )
