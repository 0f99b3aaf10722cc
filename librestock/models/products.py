# librestock/models/products.py

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from librestock.database import Base
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Product(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "products"

    sku = Column(String(50), nullable=False, unique=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)

    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False)
    brand_id = Column(Uuid, nullable=True)

    volume_ml = Column(Integer, nullable=True)
    weight_kg = Column(Numeric(10, 3), nullable=True)
    dimensions_cm = Column(String(50), nullable=True)

    standard_cost = Column(Numeric(12, 2), nullable=True)
    standard_price = Column(Numeric(12, 2), nullable=True)
    markup_percentage = Column(Numeric(6, 2), nullable=True)
    reorder_point = Column(Integer, nullable=False, default=0)

    primary_supplier_id = Column(Uuid, ForeignKey("suppliers.id", ondelete="SET NULL"), nullable=True)
    supplier_sku = Column(String(50), nullable=True)
    barcode = Column(String(100), nullable=True)
    unit = Column(String(50), nullable=True)

    is_active = Column(Boolean, nullable=False, default=True)
    is_perishable = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)

    created_by = Column(String(255), nullable=True)
    updated_by = Column(String(255), nullable=True)

    category = relationship("Category")

    __table_args__ = (
        Index("ix_products_category_id", "category_id"),
        Index("ix_products_name", "name"),
        CheckConstraint("reorder_point >= 0", name="ck_products_reorder_point_non_negative"),
    )
