from slowapi import Limiter
from slowapi.util import get_remote_address

from librestock.core.config import settings

# ---------------- THROTTLE PRESETS ----------------
STANDARD_LIMIT = "100/minute"
BULK_LIMIT = "20/minute"

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[STANDARD_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)
