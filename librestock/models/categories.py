# librestock/models/categories.py

from sqlalchemy import Column, ForeignKey, Index, String, Uuid

from librestock.database import Base
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Category(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "categories"

    name = Column(String(100), nullable=False)
    parent_id = Column(Uuid, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    description = Column(String(500), nullable=True)

    __table_args__ = (
        Index("ix_categories_parent_id", "parent_id"),
    )
