# librestock/models/locations.py

from sqlalchemy import Boolean, Column, Enum, String, Text

from librestock.database import Base
from librestock.models.enums import LocationType
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Location(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "locations"

    name = Column(String(200), nullable=False)
    type = Column(Enum(LocationType, name="location_type"), nullable=False, default=LocationType.WAREHOUSE)
    address = Column(Text, nullable=True)
    contact_person = Column(String(200), nullable=True)
    phone = Column(String(50), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
