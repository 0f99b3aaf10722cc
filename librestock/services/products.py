# =========================================================
# PRODUCT SERVICE
#
# - SKU is unique across all products
# - standard_price must not be lower than standard_cost
# - Bulk operations report per-item outcomes, never all-or-nothing
# =========================================================

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.core.bulk import (
    BulkOperationResult,
    add_bulk_failure,
    add_bulk_success,
    add_not_found_failures,
    create_empty_bulk_result,
    find_duplicates,
    partition_by_existence,
)
from librestock.core.transactions import commit_or_raise
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.models.photos import Photo
from librestock.models.products import Product
from librestock.models.suppliers import Supplier
from librestock.repositories import categories as category_repository
from librestock.repositories import products as product_repository
from librestock.schemas.photo import PhotoCreate
from librestock.schemas.product import (
    BulkCreateProducts,
    BulkDelete,
    BulkUpdateStatus,
    ProductCreate,
    ProductUpdate,
)
from librestock.services import audit_logs as audit_service

logger = logging.getLogger("librestock")

PRICE_BELOW_COST = "Standard price must be greater than or equal to standard cost"
DUPLICATE_SKU = "A product with this SKU already exists"

# SQLite and PostgreSQL names for the SKU unique constraint
SKU_CONSTRAINTS = {"products.sku": DUPLICATE_SKU, "products_sku_key": DUPLICATE_SKU}
NON_NULLABLE_FIELDS = ("sku", "name", "category_id", "reorder_point", "is_active", "is_perishable")


def get_product_or_404(db: Session, product_id: UUID) -> Product:
    product = product_repository.find_by_id(db, product_id)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return product


def _check_price(cost, price) -> None:
    if cost is not None and price is not None and price < cost:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=PRICE_BELOW_COST,
        )


def _require_category(db: Session, category_id: UUID, status_code: int) -> None:
    if not category_repository.exists_by_id(db, category_id):
        raise HTTPException(status_code=status_code, detail="Category not found")


def _supplier_exists(db: Session, supplier_id: UUID) -> bool:
    return db.query(Supplier.id).filter(Supplier.id == supplier_id).first() is not None


def _require_supplier(db: Session, supplier_id: UUID | None) -> None:
    if supplier_id is not None and not _supplier_exists(db, supplier_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Supplier not found")


def list_by_category(db: Session, category_id: UUID) -> list[Product]:
    _require_category(db, category_id, status.HTTP_404_NOT_FOUND)
    return product_repository.find_by_category_ids(db, [category_id])


def list_by_category_tree(db: Session, category_id: UUID) -> list[Product]:
    _require_category(db, category_id, status.HTTP_404_NOT_FOUND)
    category_ids = [category_id] + category_repository.find_all_descendant_ids(db, category_id)
    return product_repository.find_by_category_ids(db, category_ids)


def create_product(db: Session, data: ProductCreate, context: AuditContext) -> Product:
    _require_category(db, data.category_id, status.HTTP_400_BAD_REQUEST)
    _require_supplier(db, data.primary_supplier_id)

    if product_repository.find_by_sku(db, data.sku):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_SKU)

    _check_price(data.standard_cost, data.standard_price)

    product = Product(
        **data.model_dump(),
        created_by=context.user_id,
        updated_by=context.user_id,
    )

    db.add(product)
    commit_or_raise(db, "Unable to create product", constraint_details=SKU_CONSTRAINTS)
    db.refresh(product)

    logger.info(f"Product created: {product.id} ({product.sku})")
    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.PRODUCT,
        product.id,
        after=audit_service.snapshot(product),
    )

    return product


def update_product(
    db: Session,
    product_id: UUID,
    data: ProductUpdate,
    context: AuditContext,
) -> Product:
    product = get_product_or_404(db, product_id)
    before = audit_service.snapshot(product)
    # Explicit nulls on required columns mean "leave unchanged"
    values = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key not in NON_NULLABLE_FIELDS
    }

    if "category_id" in values:
        _require_category(db, values["category_id"], status.HTTP_400_BAD_REQUEST)

    _require_supplier(db, values.get("primary_supplier_id"))

    if values.get("sku") and values["sku"] != product.sku:
        if product_repository.find_by_sku(db, values["sku"]):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_SKU)

    # Validate against the merged cost/price, not only the new values
    new_cost = values.get("standard_cost", product.standard_cost)
    new_price = values.get("standard_price", product.standard_price)
    _check_price(new_cost, new_price)

    for key, value in values.items():
        setattr(product, key, value)
    product.updated_by = context.user_id

    commit_or_raise(db, "Unable to update product", constraint_details=SKU_CONSTRAINTS)
    db.refresh(product)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.PRODUCT,
        product.id,
        before=before,
        after=audit_service.snapshot(product),
    )

    return product


def delete_product(db: Session, product_id: UUID, context: AuditContext) -> None:
    product = get_product_or_404(db, product_id)
    before = audit_service.snapshot(product)

    db.delete(product)
    commit_or_raise(
        db,
        "Unable to delete product",
        conflict_detail="Product is still referenced by orders",
    )

    logger.info(f"Product deleted: {product_id}")
    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.PRODUCT,
        product_id,
        before=before,
    )


# ---------------- BULK ----------------

def bulk_create(db: Session, data: BulkCreateProducts, context: AuditContext) -> BulkOperationResult:
    result = create_empty_bulk_result()

    # A missing category fails the whole batch
    category_ids = list(dict.fromkeys(item.category_id for item in data.products))
    for category_id in category_ids:
        if not category_repository.exists_by_id(db, category_id):
            for item in data.products:
                add_bulk_failure(result, f"Category {category_id} not found", sku=item.sku)
            return result

    duplicate_skus = set(find_duplicates(item.sku for item in data.products))
    for item in data.products:
        if item.sku in duplicate_skus:
            add_bulk_failure(result, "Duplicate SKU in request", sku=item.sku)

    for item in data.products:
        if item.sku in duplicate_skus:
            continue

        if product_repository.find_by_sku(db, item.sku):
            add_bulk_failure(result, DUPLICATE_SKU, sku=item.sku)
            continue

        if item.primary_supplier_id is not None and not _supplier_exists(db, item.primary_supplier_id):
            add_bulk_failure(result, "Supplier not found", sku=item.sku)
            continue

        if (
            item.standard_cost is not None
            and item.standard_price is not None
            and item.standard_price < item.standard_cost
        ):
            add_bulk_failure(result, PRICE_BELOW_COST, sku=item.sku)
            continue

        product = Product(
            **item.model_dump(),
            created_by=context.user_id,
            updated_by=context.user_id,
        )

        try:
            db.add(product)
            db.commit()
            db.refresh(product)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Bulk create failed for {item.sku}: {str(e)}")
            add_bulk_failure(result, "Unable to create product", sku=item.sku)
            continue

        add_bulk_success(result, product.id)
        audit_service.record(
            db,
            context,
            AuditAction.CREATE,
            AuditEntityType.PRODUCT,
            product.id,
            after=audit_service.snapshot(product),
        )

    logger.info(
        f"Bulk product create: {result.success_count} created, {result.failure_count} failed"
    )
    return result


def bulk_update_status(
    db: Session,
    data: BulkUpdateStatus,
    context: AuditContext,
) -> BulkOperationResult:
    result = create_empty_bulk_result()

    # A repeated id is one item
    ids = list(dict.fromkeys(data.ids))
    existing_ids = {product.id for product in product_repository.find_by_ids(db, ids)}
    ids_to_update, not_found = partition_by_existence(ids, existing_ids)
    add_not_found_failures(result, not_found, "Product")

    if not ids_to_update:
        return result

    try:
        product_repository.update_many(
            db,
            ids_to_update,
            {"is_active": data.is_active, "updated_by": context.user_id},
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Bulk status update failed: {str(e)}")
        for product_id in ids_to_update:
            add_bulk_failure(result, "Unable to update product", id=product_id)
        return result

    # Rows deleted between the read and the update were not touched
    updated_ids = {product.id for product in product_repository.find_by_ids(db, ids_to_update)}
    for product_id in ids_to_update:
        if product_id not in updated_ids:
            add_bulk_failure(result, "Product not found", id=product_id)
            continue

        add_bulk_success(result, product_id)
        audit_service.record(
            db,
            context,
            AuditAction.STATUS_CHANGE,
            AuditEntityType.PRODUCT,
            product_id,
            after={"is_active": data.is_active},
        )

    return result


def bulk_delete(db: Session, data: BulkDelete, context: AuditContext) -> BulkOperationResult:
    result = create_empty_bulk_result()

    ids = list(dict.fromkeys(data.ids))
    existing_ids = {product.id for product in product_repository.find_by_ids(db, ids)}
    ids_to_delete, not_found = partition_by_existence(ids, existing_ids)
    add_not_found_failures(result, not_found, "Product")

    if not ids_to_delete:
        return result

    try:
        product_repository.delete_many(db, ids_to_delete)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Bulk delete failed: {str(e)}")
        for product_id in ids_to_delete:
            add_bulk_failure(result, "Unable to delete product", id=product_id)
        return result

    remaining_ids = {product.id for product in product_repository.find_by_ids(db, ids_to_delete)}
    for product_id in ids_to_delete:
        if product_id in remaining_ids:
            add_bulk_failure(result, "Unable to delete product", id=product_id)
            continue

        add_bulk_success(result, product_id)
        audit_service.record(
            db,
            context,
            AuditAction.DELETE,
            AuditEntityType.PRODUCT,
            product_id,
        )

    return result


# ---------------- PHOTOS ----------------

def list_photos(db: Session, product_id: UUID) -> list[Photo]:
    get_product_or_404(db, product_id)
    return (
        db.query(Photo)
        .filter(Photo.product_id == product_id)
        .order_by(Photo.display_order.asc(), Photo.created_at.asc())
        .all()
    )


def add_photo(db: Session, product_id: UUID, data: PhotoCreate, context: AuditContext) -> Photo:
    get_product_or_404(db, product_id)

    display_order = data.display_order
    if display_order is None:
        last = (
            db.query(Photo.display_order)
            .filter(Photo.product_id == product_id)
            .order_by(Photo.display_order.desc())
            .first()
        )
        display_order = last[0] + 1 if last else 0

    photo = Photo(
        product_id=product_id,
        url=data.url,
        caption=data.caption,
        display_order=display_order,
        uploaded_by=context.user_id,
    )

    db.add(photo)
    commit_or_raise(db, "Unable to add photo")
    db.refresh(photo)

    audit_service.record(
        db,
        context,
        AuditAction.ADD_PHOTO,
        AuditEntityType.PRODUCT,
        product_id,
        after={"photo_id": str(photo.id), "url": photo.url},
    )

    return photo


def delete_photo(db: Session, product_id: UUID, photo_id: UUID, context: AuditContext) -> None:
    photo = (
        db.query(Photo)
        .filter(Photo.id == photo_id, Photo.product_id == product_id)
        .first()
    )

    if not photo:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Photo not found",
        )

    before = audit_service.snapshot(photo)
    db.delete(photo)
    commit_or_raise(db, "Unable to delete photo")

    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.PHOTO,
        photo_id,
        before=before,
    )
