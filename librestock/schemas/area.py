from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field


class AreaCreate(BaseModel):
    location_id: UUID
    parent_id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=100)
    code: str = Field("", max_length=50)
    description: str = ""
    is_active: bool = True


class AreaUpdate(BaseModel):
    parent_id: UUID | None = None
    name: str | None = Field(None, min_length=1, max_length=100)
    code: str | None = Field(None, max_length=50)
    description: str | None = None
    is_active: bool | None = None


class AreaResponse(BaseModel):
    id: UUID
    location_id: UUID
    parent_id: UUID | None
    name: str
    code: str
    description: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AreaWithChildrenResponse(AreaResponse):
    children: list["AreaWithChildrenResponse"] = []


AreaWithChildrenResponse.model_rebuild()
