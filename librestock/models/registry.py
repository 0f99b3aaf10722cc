# Imports every model so Base.metadata knows the full schema
# (used by app startup, Alembic and the tests).

from librestock.models.areas import Area
from librestock.models.audit_logs import AuditLog
from librestock.models.branding import BrandingSettings
from librestock.models.categories import Category
from librestock.models.clients import Client
from librestock.models.inventory import Inventory
from librestock.models.locations import Location
from librestock.models.orders import Order, OrderItem
from librestock.models.photos import Photo
from librestock.models.products import Product
from librestock.models.suppliers import Supplier, SupplierProduct

__all__ = [
    "Area",
    "AuditLog",
    "BrandingSettings",
    "Category",
    "Client",
    "Inventory",
    "Location",
    "Order",
    "OrderItem",
    "Photo",
    "Product",
    "Supplier",
    "SupplierProduct",
]
