"""Accumulate per-item outcomes of a bulk operation into one response.

Each item's outcome is final once recorded; nothing here rolls back.
Existence checks must be resolved by the caller before these helpers run.
"""

from typing import Hashable, Iterable, Sequence, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=Hashable)


class BulkFailure(BaseModel):
    id: str | None = None
    sku: str | None = None
    error: str


class BulkOperationResult(BaseModel):
    success_count: int = 0
    failure_count: int = 0
    succeeded: list[str] = Field(default_factory=list)
    failures: list[BulkFailure] = Field(default_factory=list)


def create_empty_bulk_result() -> BulkOperationResult:
    return BulkOperationResult()


def add_bulk_success(result: BulkOperationResult, id) -> None:
    """Record one success. Ids are stored as strings so UUIDs serialise as-is."""
    result.success_count += 1
    result.succeeded.append(str(id))


def add_bulk_failure(
    result: BulkOperationResult,
    error: str,
    id=None,
    sku: str | None = None,
) -> None:
    failure = BulkFailure(error=error)
    if id:
        failure.id = str(id)
    if sku:
        failure.sku = sku

    result.failure_count += 1
    result.failures.append(failure)


def find_duplicates(items: Iterable[T]) -> list[T]:
    """Values seen more than once, in the order their repeat was first found."""
    seen: set = set()
    duplicates: list = []
    reported: set = set()

    for item in items:
        if item in seen and item not in reported:
            duplicates.append(item)
            reported.add(item)
        seen.add(item)

    return duplicates


def partition_by_existence(
    ids: Sequence[T],
    existing_ids: Iterable[T],
) -> tuple[list[T], list[T]]:
    existing_set = set(existing_ids)
    existing = [item for item in ids if item in existing_set]
    not_found = [item for item in ids if item not in existing_set]
    return existing, not_found


def add_not_found_failures(
    result: BulkOperationResult,
    not_found_ids: Iterable,
    entity_name: str = "Entity",
) -> None:
    for not_found_id in not_found_ids:
        add_bulk_failure(result, f"{entity_name} not found", id=not_found_id)
