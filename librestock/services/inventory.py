# =========================================================
# INVENTORY SERVICE
#
# One inventory row per (product, location).
# Quantity never goes below zero: adjustments are checked
# here and again in the UPDATE's WHERE clause.
# =========================================================

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.core.transactions import commit_or_raise
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.models.inventory import Inventory
from librestock.repositories import areas as area_repository
from librestock.repositories import inventory as inventory_repository
from librestock.repositories import locations as location_repository
from librestock.repositories import products as product_repository
from librestock.schemas.inventory import InventoryAdjust, InventoryCreate, InventoryUpdate
from librestock.services import audit_logs as audit_service

logger = logging.getLogger("librestock")

DUPLICATE_INVENTORY = (
    "Inventory for this product at this location already exists. "
    "Use the update or adjust endpoint instead."
)
DUPLICATE_AT_TARGET = "Inventory for this product at the target location already exists"
NON_NULLABLE_FIELDS = ("location_id", "quantity", "batch_number")


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def get_inventory_or_404(db: Session, inventory_id: UUID) -> Inventory:
    inventory = inventory_repository.find_by_id(db, inventory_id)

    if not inventory:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Inventory item not found",
        )

    return inventory


def list_by_product(db: Session, product_id: UUID) -> list[Inventory]:
    if not product_repository.find_by_id(db, product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return inventory_repository.find_by_product(db, product_id)


def list_by_location(db: Session, location_id: UUID) -> list[Inventory]:
    if not location_repository.find_by_id(db, location_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return inventory_repository.find_by_location(db, location_id)


def _check_area(db: Session, area_id: UUID, location_id: UUID) -> None:
    area = area_repository.find_by_id(db, area_id)

    if not area:
        raise _bad_request("Area not found")

    if area.location_id != location_id:
        raise _bad_request("Area must belong to the inventory location")


def create_inventory(db: Session, data: InventoryCreate, context: AuditContext) -> Inventory:
    if not product_repository.find_by_id(db, data.product_id):
        raise _bad_request("Product not found")

    if not location_repository.find_by_id(db, data.location_id):
        raise _bad_request("Location not found")

    if data.area_id is not None:
        _check_area(db, data.area_id, data.location_id)

    if inventory_repository.find_by_product_and_location(db, data.product_id, data.location_id):
        raise _bad_request(DUPLICATE_INVENTORY)

    inventory = Inventory(**data.model_dump())

    db.add(inventory)
    commit_or_raise(db, "Unable to create inventory", conflict_detail=DUPLICATE_INVENTORY)

    logger.info(
        f"Inventory created: {inventory.id} product={inventory.product_id} "
        f"location={inventory.location_id} qty={inventory.quantity}"
    )
    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.INVENTORY,
        inventory.id,
        after=audit_service.snapshot(inventory),
    )

    return get_inventory_or_404(db, inventory.id)


def update_inventory(
    db: Session,
    inventory_id: UUID,
    data: InventoryUpdate,
    context: AuditContext,
) -> Inventory:
    inventory = get_inventory_or_404(db, inventory_id)
    before = audit_service.snapshot(inventory)
    values = data.model_dump(exclude_unset=True)

    new_location_id = values.get("location_id")
    if new_location_id is not None and new_location_id != inventory.location_id:
        if not location_repository.find_by_id(db, new_location_id):
            raise _bad_request("Location not found")

        if inventory_repository.find_by_product_and_location(db, inventory.product_id, new_location_id):
            raise _bad_request(DUPLICATE_AT_TARGET)

        # A moved item cannot keep an area from the old location
        if "area_id" not in values:
            values["area_id"] = None

    if values.get("area_id") is not None:
        _check_area(db, values["area_id"], new_location_id or inventory.location_id)

    for key, value in values.items():
        if value is None and key in NON_NULLABLE_FIELDS:
            continue
        setattr(inventory, key, value)

    commit_or_raise(db, "Unable to update inventory", conflict_detail=DUPLICATE_AT_TARGET)
    db.refresh(inventory)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.INVENTORY,
        inventory.id,
        before=before,
        after=audit_service.snapshot(inventory),
    )

    return get_inventory_or_404(db, inventory.id)


def adjust_quantity(
    db: Session,
    inventory_id: UUID,
    data: InventoryAdjust,
    context: AuditContext,
) -> Inventory:
    inventory = get_inventory_or_404(db, inventory_id)
    previous_quantity = inventory.quantity

    if previous_quantity + data.adjustment < 0:
        raise _bad_request(
            f"Cannot adjust quantity by {data.adjustment}. "
            f"Current quantity is {previous_quantity}."
        )

    affected = inventory_repository.adjust_quantity(db, inventory_id, data.adjustment)
    if not affected:
        # Someone else drained the stock between our read and write
        raise _bad_request(
            f"Cannot adjust quantity by {data.adjustment}. Quantity changed concurrently."
        )

    db.expire_all()
    inventory = get_inventory_or_404(db, inventory_id)

    logger.info(
        f"Inventory {inventory_id} adjusted by {data.adjustment}: "
        f"{previous_quantity} -> {inventory.quantity}"
    )
    audit_service.record(
        db,
        context,
        AuditAction.ADJUST_QUANTITY,
        AuditEntityType.INVENTORY,
        inventory_id,
        before={"quantity": previous_quantity},
        after={"quantity": inventory.quantity},
    )

    return inventory


def delete_inventory(db: Session, inventory_id: UUID, context: AuditContext) -> None:
    inventory = get_inventory_or_404(db, inventory_id)
    before = audit_service.snapshot(inventory)

    db.delete(inventory)
    commit_or_raise(db, "Unable to delete inventory")

    logger.info(f"Inventory deleted: {inventory_id}")
    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.INVENTORY,
        inventory_id,
        before=before,
    )
