from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    parent_id: UUID | None = None
    description: str | None = Field(None, max_length=500)


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    parent_id: UUID | None = None
    description: str | None = Field(None, max_length=500)


class CategoryResponse(BaseModel):
    id: UUID
    name: str
    parent_id: UUID | None
    description: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CategoryWithChildrenResponse(CategoryResponse):
    children: list["CategoryWithChildrenResponse"] = []


CategoryWithChildrenResponse.model_rebuild()
