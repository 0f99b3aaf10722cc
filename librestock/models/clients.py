# librestock/models/clients.py

from sqlalchemy import Column, Enum, Numeric, String, Text

from librestock.database import Base
from librestock.models.enums import ClientStatus
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Client(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "clients"

    company_name = Column(String(200), nullable=False)
    yacht_name = Column(String(200), nullable=True)
    contact_person = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    billing_address = Column(Text, nullable=True)
    default_delivery_address = Column(Text, nullable=True)
    account_status = Column(Enum(ClientStatus, name="client_status"), nullable=False, default=ClientStatus.ACTIVE)
    payment_terms = Column(String(100), nullable=True)
    credit_limit = Column(Numeric(12, 2), nullable=True)
    notes = Column(Text, nullable=True)
