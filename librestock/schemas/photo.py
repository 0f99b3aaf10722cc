from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field


class PhotoCreate(BaseModel):
    url: str = Field(..., min_length=1, max_length=500)
    caption: str | None = Field(None, max_length=255)
    display_order: int | None = Field(None, ge=0)


class PhotoResponse(BaseModel):
    id: UUID
    product_id: UUID
    url: str
    caption: str | None
    display_order: int
    uploaded_by: str | None
    created_at: datetime

    class Config:
        from_attributes = True
