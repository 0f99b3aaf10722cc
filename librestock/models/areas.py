# librestock/models/areas.py

from sqlalchemy import Boolean, Column, ForeignKey, Index, String, Text, Uuid

from librestock.database import Base
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Area(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "areas"

    location_id = Column(Uuid, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False)
    parent_id = Column(Uuid, ForeignKey("areas.id", ondelete="CASCADE"), nullable=True)
    name = Column(String(100), nullable=False)
    code = Column(String(50), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_areas_location_id", "location_id"),
        Index("ix_areas_parent_id", "parent_id"),
    )
