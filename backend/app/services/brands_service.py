"""
Brand service — CRUD, seeding and the schema-conformance repair pass.

Every function takes the request's AsyncSession and returns plain
JSON-ready dicts.  Failures surface as BrandServiceError subclasses,
which the API layer maps to status codes.
"""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.constants import BRAND_NOT_FOUND_MESSAGE, NO_UPDATES_MESSAGE
from app.core.errors import BrandNotFoundError, BrandStorageError, BrandValidationError
from app.core.logging import get_logger
from app.repositories import brands as brand_repository
from app.services.brand_seeding import generate_brands_data
from app.services.excel_export import export_brands_to_excel
from app.validation.batch_repair import repair_batch
from app.validation.schema_validator import validate_record
from app.validation.schemas import BrandCreate, BrandUpdate

logger = get_logger(__name__)


# ─── Repair ───────────────────────────────────
async def validate_and_update(db: AsyncSession) -> dict[str, Any]:
    """
    Repair every stored brand that does not conform to the schema.

    1. Fetch all brands
    2. Repair, drop unsalvageable, re-validate, keep the changed ones
    3. Replace the changed brands wholesale in one bulk write
    """
    try:
        records = await brand_repository.list_brand_records(db)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching brands")
        raise BrandStorageError("Failed to fetch brands") from exc

    result = repair_batch(records)
    if not result.corrected:
        return {"statusCode": 200, "message": NO_UPDATES_MESSAGE}

    try:
        modified = await brand_repository.bulk_replace(db, result.corrected)
    except SQLAlchemyError as exc:
        logger.exception("Error updating brands", attempted=len(result.corrected))
        raise BrandStorageError("Failed to update brands") from exc

    logger.info("Brands repaired", attempted=len(result.corrected), modified=modified)
    return {"statusCode": 200, "message": f"{modified} brands updated successfully."}


# ─── Seeding ──────────────────────────────────
async def seed_data(db: AsyncSession) -> dict[str, Any]:
    """Generate synthetic brands, document them in Excel, insert them."""
    brand_data = generate_brands_data(settings.SEED_BRAND_COUNT, settings.SEED_BASE)
    export_brands_to_excel(brand_data, settings.BRAND_EXPORT_PATH)

    try:
        brands = await brand_repository.insert_many(db, brand_data)
    except SQLAlchemyError as exc:
        logger.exception("Error inserting seed brands")
        raise BrandStorageError("Failed to insert seed brands") from exc

    logger.info("Seed brands inserted", count=len(brands))
    return {
        "statusCode": 201,
        "message": "Generated data inserted successfully",
        "brands": brands,
    }


# ─── CRUD ─────────────────────────────────────
async def create_brand(db: AsyncSession, payload: Mapping[str, Any]) -> dict[str, Any]:
    outcome = validate_record(payload, BrandCreate)
    if not outcome.ok:
        raise BrandValidationError(outcome.summary(), details={"fields": _issue_fields(outcome)})

    brand = await brand_repository.create_brand(db, outcome.value)
    logger.info("Brand created", brand_id=brand["id"])
    return brand


async def list_brands(db: AsyncSession) -> list[dict[str, Any]]:
    return await brand_repository.list_brand_records(db)


async def get_brand(db: AsyncSession, brand_id: str) -> dict[str, Any]:
    brand = await brand_repository.get_brand(db, brand_id)
    if brand is None:
        raise BrandNotFoundError(BRAND_NOT_FOUND_MESSAGE, details={"brand_id": brand_id})
    return brand


async def update_brand(
    db: AsyncSession,
    brand_id: str,
    payload: Mapping[str, Any],
) -> dict[str, Any]:
    """Validate a partial update and merge it into the stored brand."""
    outcome = validate_record(payload, BrandUpdate)
    if not outcome.ok:
        raise BrandValidationError(outcome.summary(), details={"fields": _issue_fields(outcome)})

    brand = await brand_repository.update_fields(db, brand_id, outcome.value)
    if brand is None:
        raise BrandNotFoundError(BRAND_NOT_FOUND_MESSAGE, details={"brand_id": brand_id})

    logger.info("Brand updated", brand_id=brand_id, fields=sorted(outcome.value))
    return {"statusCode": 200, "message": "Brand updated successfully"}


async def delete_brand(db: AsyncSession, brand_id: str) -> dict[str, Any]:
    deleted = await brand_repository.delete_brand(db, brand_id)
    if not deleted:
        raise BrandNotFoundError(BRAND_NOT_FOUND_MESSAGE, details={"brand_id": brand_id})

    logger.info("Brand deleted", brand_id=brand_id)
    return {"statusCode": 200, "message": "Brand deleted successfully"}


async def delete_all_brands(db: AsyncSession) -> dict[str, Any]:
    deleted = await brand_repository.delete_all(db)
    logger.info("All brands deleted", count=deleted)
    return {
        "statusCode": 200,
        "message": f"{deleted} brands deleted successfully",
        "deletedCount": deleted,
    }


def _issue_fields(outcome) -> list[str]:
    return [issue.field_name for issue in outcome.issues]
