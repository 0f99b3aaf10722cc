from datetime import datetime, timedelta, timezone
from jose import jwt

from librestock.core.config import settings


class MissingSecretError(Exception):
    """Raised when no signing secret is configured."""


def _secret() -> str:
    if not settings.BETTER_AUTH_SECRET:
        raise MissingSecretError("BETTER_AUTH_SECRET is not configured")
    return settings.BETTER_AUTH_SECRET


def create_access_token(data: dict, expires_delta: timedelta | None = None):
    to_encode = data.copy()

    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        _secret(),
        algorithm=settings.JWT_ALGORITHM
    )


def decode_access_token(token: str):
    # Raises jose's ExpiredSignatureError / JWTError, callers classify them
    return jwt.decode(
        token,
        _secret(),
        algorithms=[settings.JWT_ALGORITHM]
    )
