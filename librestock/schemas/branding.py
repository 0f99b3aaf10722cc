from datetime import datetime
from pydantic import BaseModel, Field

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class PoweredBy(BaseModel):
    name: str
    url: str


class BrandingUpdate(BaseModel):
    app_name: str | None = Field(None, min_length=1, max_length=100)
    tagline: str | None = Field(None, max_length=255)
    logo_url: str | None = Field(None, max_length=500)
    favicon_url: str | None = Field(None, max_length=500)
    primary_color: str | None = Field(
        None,
        pattern=HEX_COLOR_PATTERN,
        description="Hex color such as #3b82f6",
    )


class BrandingResponse(BaseModel):
    app_name: str
    tagline: str
    logo_url: str | None
    favicon_url: str | None
    primary_color: str
    powered_by: PoweredBy
    updated_at: datetime
