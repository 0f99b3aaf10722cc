# librestock/models/suppliers.py

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from librestock.database import Base
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Supplier(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "suppliers"

    name = Column(String(200), nullable=False)
    contact_person = Column(String(200), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    website = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class SupplierProduct(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "supplier_products"

    supplier_id = Column(Uuid, ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    supplier_sku = Column(String(50), nullable=True)
    cost_per_unit = Column(Numeric(12, 2), nullable=True)
    lead_time_days = Column(Integer, nullable=True)
    minimum_order_quantity = Column(Integer, nullable=True)
    is_preferred = Column(Boolean, nullable=False, default=False)

    product = relationship("Product")

    __table_args__ = (
        UniqueConstraint("supplier_id", "product_id", name="uq_supplier_product"),
        Index("ix_supplier_products_product_id", "product_id"),
    )
