"""initial_schema

Revision ID: 5b1e2c7d9a40
Revises:
Create Date: 2026-10-19 09:12:44.518203
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e2c7d9a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


LOCATION_TYPE = sa.Enum("WAREHOUSE", "SUPPLIER", "IN_TRANSIT", "CLIENT", name="location_type")
CLIENT_STATUS = sa.Enum("ACTIVE", "SUSPENDED", "INACTIVE", name="client_status")
ORDER_STATUS = sa.Enum(
    "DRAFT", "CONFIRMED", "SOURCING", "PICKING", "PACKED",
    "SHIPPED", "DELIVERED", "CANCELLED", "ON_HOLD",
    name="order_status",
)
AUDIT_ACTION = sa.Enum(
    "CREATE", "UPDATE", "DELETE", "ADJUST_QUANTITY", "ADD_PHOTO", "STATUS_CHANGE",
    name="audit_action",
)


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""

    # CATEGORIES
    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("parent_id", sa.Uuid(), sa.ForeignKey("categories.id", ondelete="SET NULL"), nullable=True),
        sa.Column("description", sa.String(500), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_categories_parent_id", "categories", ["parent_id"], unique=False)

    # SUPPLIERS
    op.create_table(
        "suppliers",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("contact_person", sa.String(200), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("website", sa.String(500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    # LOCATIONS
    op.create_table(
        "locations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("type", LOCATION_TYPE, nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("contact_person", sa.String(200), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    # CLIENTS
    op.create_table(
        "clients",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("company_name", sa.String(200), nullable=False),
        sa.Column("yacht_name", sa.String(200), nullable=True),
        sa.Column("contact_person", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("billing_address", sa.Text(), nullable=True),
        sa.Column("default_delivery_address", sa.Text(), nullable=True),
        sa.Column("account_status", CLIENT_STATUS, nullable=False),
        sa.Column("payment_terms", sa.String(100), nullable=True),
        sa.Column("credit_limit", sa.Numeric(12, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )

    # BRANDING (singleton row, id 1)
    op.create_table(
        "branding_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("app_name", sa.String(100), nullable=False),
        sa.Column("tagline", sa.String(255), nullable=False),
        sa.Column("logo_url", sa.String(500), nullable=True),
        sa.Column("favicon_url", sa.String(500), nullable=True),
        sa.Column("primary_color", sa.String(7), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_by", sa.String(255), nullable=True),
    )

    # AUDIT LOGS
    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=True),
        sa.Column("action", AUDIT_ACTION, nullable=False),
        sa.Column("entity_type", sa.String(50), nullable=False),
        sa.Column("entity_id", sa.Uuid(), nullable=True),
        sa.Column("changes", sa.JSON(), nullable=True),
        sa.Column("ip_address", sa.String(45), nullable=True),
        sa.Column("user_agent", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_audit_logs_entity", "audit_logs", ["entity_type", "entity_id"], unique=False)
    op.create_index("ix_audit_logs_user_id", "audit_logs", ["user_id"], unique=False)
    op.create_index("ix_audit_logs_created_at", "audit_logs", ["created_at"], unique=False)

    # PRODUCTS
    op.create_table(
        "products",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("sku", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_id", sa.Uuid(), sa.ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("brand_id", sa.Uuid(), nullable=True),
        sa.Column("volume_ml", sa.Integer(), nullable=True),
        sa.Column("weight_kg", sa.Numeric(10, 3), nullable=True),
        sa.Column("dimensions_cm", sa.String(50), nullable=True),
        sa.Column("standard_cost", sa.Numeric(12, 2), nullable=True),
        sa.Column("standard_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("markup_percentage", sa.Numeric(6, 2), nullable=True),
        sa.Column("reorder_point", sa.Integer(), nullable=False),
        sa.Column("primary_supplier_id", sa.Uuid(), sa.ForeignKey("suppliers.id", ondelete="SET NULL"), nullable=True),
        sa.Column("supplier_sku", sa.String(50), nullable=True),
        sa.Column("barcode", sa.String(100), nullable=True),
        sa.Column("unit", sa.String(50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("is_perishable", sa.Boolean(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("reorder_point >= 0", name="ck_products_reorder_point_non_negative"),
    )
    op.create_index("ix_products_category_id", "products", ["category_id"], unique=False)
    op.create_index("ix_products_name", "products", ["name"], unique=False)

    # AREAS
    op.create_table(
        "areas",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("location_id", sa.Uuid(), sa.ForeignKey("locations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("parent_id", sa.Uuid(), sa.ForeignKey("areas.id", ondelete="CASCADE"), nullable=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_areas_location_id", "areas", ["location_id"], unique=False)
    op.create_index("ix_areas_parent_id", "areas", ["parent_id"], unique=False)

    # INVENTORY
    op.create_table(
        "inventory",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("product_id", sa.Uuid(), sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
        sa.Column("location_id", sa.Uuid(), sa.ForeignKey("locations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("area_id", sa.Uuid(), sa.ForeignKey("areas.id", ondelete="SET NULL"), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("batch_number", sa.String(100), nullable=False),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("cost_per_unit", sa.Numeric(12, 2), nullable=True),
        sa.Column("received_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("product_id", "location_id", name="uq_inventory_product_location"),
        sa.CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )
    op.create_index("ix_inventory_location_id", "inventory", ["location_id"], unique=False)
    op.create_index("ix_inventory_area_id", "inventory", ["area_id"], unique=False)

    # SUPPLIER PRODUCTS
    op.create_table(
        "supplier_products",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("supplier_id", sa.Uuid(), sa.ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Uuid(), sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
        sa.Column("supplier_sku", sa.String(50), nullable=True),
        sa.Column("cost_per_unit", sa.Numeric(12, 2), nullable=True),
        sa.Column("lead_time_days", sa.Integer(), nullable=True),
        sa.Column("minimum_order_quantity", sa.Integer(), nullable=True),
        sa.Column("is_preferred", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("supplier_id", "product_id", name="uq_supplier_product"),
    )
    op.create_index("ix_supplier_products_product_id", "supplier_products", ["product_id"], unique=False)

    # PHOTOS
    op.create_table(
        "photos",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("product_id", sa.Uuid(), sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
        sa.Column("url", sa.String(500), nullable=False),
        sa.Column("caption", sa.String(255), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("uploaded_by", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index(
        "ix_photos_product_id_display_order",
        "photos",
        ["product_id", "display_order"],
        unique=False,
    )

    # ORDERS
    op.create_table(
        "orders",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("order_number", sa.String(50), nullable=False, unique=True),
        sa.Column("client_id", sa.Uuid(), sa.ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("status", ORDER_STATUS, nullable=False),
        sa.Column("delivery_deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("delivery_address", sa.Text(), nullable=False),
        sa.Column("yacht_name", sa.String(200), nullable=True),
        sa.Column("special_instructions", sa.Text(), nullable=True),
        sa.Column("total_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("assigned_to", sa.String(255), nullable=True),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("confirmed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("shipped_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("delivered_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_orders_client_id", "orders", ["client_id"], unique=False)
    op.create_index("ix_orders_status", "orders", ["status"], unique=False)

    # ORDER ITEMS
    op.create_table(
        "order_items",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("order_id", sa.Uuid(), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Uuid(), sa.ForeignKey("products.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("subtotal", sa.Numeric(12, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("quantity_picked", sa.Integer(), nullable=False),
        sa.Column("quantity_packed", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("photos")
    op.drop_table("supplier_products")
    op.drop_table("inventory")
    op.drop_table("areas")
    op.drop_table("products")
    op.drop_table("audit_logs")
    op.drop_table("branding_settings")
    op.drop_table("clients")
    op.drop_table("locations")
    op.drop_table("suppliers")
    op.drop_table("categories")

    bind = op.get_bind()
    for enum_type in (AUDIT_ACTION, ORDER_STATUS, CLIENT_STATUS, LOCATION_TYPE):
        enum_type.drop(bind, checkfirst=True)
