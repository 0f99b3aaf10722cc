# librestock/models/inventory.py

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from librestock.database import Base
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Inventory(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "inventory"

    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    location_id = Column(Uuid, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False)
    area_id = Column(Uuid, ForeignKey("areas.id", ondelete="SET NULL"), nullable=True)

    quantity = Column(Integer, nullable=False, default=0)
    batch_number = Column(String(100), nullable=False, default="")
    expiry_date = Column(Date, nullable=True)
    cost_per_unit = Column(Numeric(12, 2), nullable=True)
    received_date = Column(Date, nullable=True)

    product = relationship("Product")
    location = relationship("Location")
    area = relationship("Area")

    __table_args__ = (
        UniqueConstraint("product_id", "location_id", name="uq_inventory_product_location"),
        Index("ix_inventory_location_id", "location_id"),
        Index("ix_inventory_area_id", "area_id"),
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )
