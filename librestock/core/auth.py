# librestock/core/auth.py

import logging
from dataclasses import dataclass, field
from enum import Enum

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError

from librestock.core.jwt import MissingSecretError, decode_access_token
from librestock.core.oauth2 import bearer_scheme

logger = logging.getLogger("librestock")


class AuthErrorType(str, Enum):
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"
    TOKEN_MISSING = "token_missing"
    CONFIGURATION_ERROR = "configuration_error"
    UNKNOWN_ERROR = "unknown_error"


@dataclass
class CurrentUser:
    user_id: str
    session_id: str | None = None
    claims: dict = field(default_factory=dict)


def auth_error(message: str, error_type: AuthErrorType, retryable: bool = False):
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={
            "message": message,
            "error_type": error_type.value,
            "retryable": retryable,
        },
        headers={"WWW-Authenticate": "Bearer"},
    )


def _resolve_user(credentials: HTTPAuthorizationCredentials | None) -> CurrentUser:
    if credentials is None or not credentials.credentials:
        raise auth_error("No authorization token provided", AuthErrorType.TOKEN_MISSING)

    try:
        payload = decode_access_token(credentials.credentials)
    except MissingSecretError:
        logger.error("Token verification failed: secret key not configured")
        raise auth_error(
            "Authentication service misconfigured: secret key not configured",
            AuthErrorType.CONFIGURATION_ERROR,
        )
    except ExpiredSignatureError:
        raise auth_error(
            "Token has expired. Please sign in again.",
            AuthErrorType.TOKEN_EXPIRED,
            retryable=True,
        )
    except JWTError:
        raise auth_error("Invalid authentication token", AuthErrorType.TOKEN_INVALID)

    user_id = payload.get("sub")

    if not user_id:
        raise auth_error("Invalid token payload", AuthErrorType.TOKEN_INVALID)

    return CurrentUser(
        user_id=str(user_id),
        session_id=payload.get("sid"),
        claims=payload,
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser:
    return _resolve_user(credentials)

