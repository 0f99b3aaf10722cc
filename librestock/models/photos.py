# librestock/models/photos.py

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.sql import func

from librestock.database import Base


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    url = Column(String(500), nullable=False)
    caption = Column(String(255), nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    uploaded_by = Column(String(255), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_photos_product_id_display_order", "product_id", "display_order"),
    )
