from uuid import UUID
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field

from librestock.models.enums import LocationType

LocationSortField = Literal["name", "type", "created_at", "updated_at"]


class LocationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    type: LocationType = LocationType.WAREHOUSE
    address: str | None = None
    contact_person: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)
    is_active: bool = True


class LocationUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    type: LocationType | None = None
    address: str | None = None
    contact_person: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)
    is_active: bool | None = None


class LocationResponse(BaseModel):
    id: UUID
    name: str
    type: LocationType
    address: str | None
    contact_person: str | None
    phone: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
