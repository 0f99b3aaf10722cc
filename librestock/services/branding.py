"""Global branding settings.

There is a single row (id 1). Reads fall back to built-in defaults without
touching the database; the "powered by" attribution is added at read time and
is never stored.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from librestock.repositories import branding as branding_repository
from librestock.schemas.branding import BrandingResponse, BrandingUpdate

logger = logging.getLogger("librestock")

DEFAULT_BRANDING = {
    "app_name": "LibreStock",
    "tagline": "Inventory management system",
    "logo_url": None,
    "favicon_url": None,
    "primary_color": "#3b82f6",
}

CLEARABLE_FIELDS = {"logo_url", "favicon_url"}

POWERED_BY = {
    "name": "LibreStock",
    "url": "https://github.com/maximilianpw/librestock",
}


class BrandingService:
    def __init__(self, db: Session):
        self.db = db

    def get(self) -> BrandingResponse:
        row = branding_repository.find(self.db)

        if row is None:
            return BrandingResponse(
                **DEFAULT_BRANDING,
                powered_by=POWERED_BY,
                updated_at=datetime.now(timezone.utc),
            )

        return BrandingResponse(
            app_name=row.app_name,
            tagline=row.tagline,
            logo_url=row.logo_url,
            favicon_url=row.favicon_url,
            primary_color=row.primary_color,
            powered_by=POWERED_BY,
            updated_at=row.updated_at,
        )

    def update(self, data: BrandingUpdate, user_id: str | None) -> BrandingResponse:
        # Only fields sent by the caller are merged; null clears URLs only
        values = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in CLEARABLE_FIELDS
        }
        values["updated_by"] = user_id

        branding_repository.upsert(self.db, DEFAULT_BRANDING, values)
        logger.info(f"Branding updated by {user_id}: {sorted(values)}")

        return self.get()
