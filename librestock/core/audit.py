# librestock/core/audit.py

from dataclasses import dataclass

from fastapi import Depends, Request

from librestock.core.auth import CurrentUser, get_current_user

USER_AGENT_MAX_LENGTH = 500


@dataclass
class AuditContext:
    user_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


def get_client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.client.host if request.client else None


def get_audit_context(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
) -> AuditContext:
    user_agent = request.headers.get("user-agent")

    return AuditContext(
        user_id=current_user.user_id,
        ip_address=get_client_ip(request),
        user_agent=user_agent[:USER_AGENT_MAX_LENGTH] if user_agent else None,
    )
