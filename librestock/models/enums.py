import enum


class LocationType(str, enum.Enum):
    WAREHOUSE = "WAREHOUSE"
    SUPPLIER = "SUPPLIER"
    IN_TRANSIT = "IN_TRANSIT"
    CLIENT = "CLIENT"


class ClientStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    INACTIVE = "INACTIVE"


class OrderStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    CONFIRMED = "CONFIRMED"
    SOURCING = "SOURCING"
    PICKING = "PICKING"
    PACKED = "PACKED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    ON_HOLD = "ON_HOLD"


class AuditAction(str, enum.Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ADJUST_QUANTITY = "ADJUST_QUANTITY"
    ADD_PHOTO = "ADD_PHOTO"
    STATUS_CHANGE = "STATUS_CHANGE"


class AuditEntityType(str, enum.Enum):
    PRODUCT = "product"
    CATEGORY = "category"
    LOCATION = "location"
    AREA = "area"
    INVENTORY = "inventory"
    SUPPLIER = "supplier"
    CLIENT = "client"
    ORDER = "order"
    PHOTO = "photo"
    BRANDING = "branding"
