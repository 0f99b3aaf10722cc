from uuid import UUID
from datetime import datetime
from typing import Any
from pydantic import BaseModel

from librestock.models.enums import AuditAction


class AuditLogResponse(BaseModel):
    id: UUID
    user_id: str | None
    action: AuditAction
    entity_type: str
    entity_id: UUID | None
    changes: dict[str, Any] | None
    ip_address: str | None
    user_agent: str | None
    created_at: datetime

    class Config:
        from_attributes = True
