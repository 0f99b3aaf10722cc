# librestock/models/branding.py

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from librestock.database import Base

BRANDING_ROW_ID = 1


class BrandingSettings(Base):
    __tablename__ = "branding_settings"

    # Singleton row, always id 1
    id = Column(Integer, primary_key=True, default=BRANDING_ROW_ID)
    app_name = Column(String(100), nullable=False)
    tagline = Column(String(255), nullable=False)
    logo_url = Column(String(500), nullable=True)
    favicon_url = Column(String(500), nullable=True)
    primary_color = Column(String(7), nullable=False)

    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    updated_by = Column(String(255), nullable=True)
