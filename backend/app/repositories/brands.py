"""
Brand repository containing all data-access operations for the brands table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
- Brands leave this module as flat records:
  {"id", **document, "createdAt", "updatedAt", "version"}
"""

from __future__ import annotations

import uuid
from typing import Any, Iterable, Mapping

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import METADATA_FIELDS
from app.db.models.brand import Brand
from app.validation.schema_validator import same_values


def parse_brand_id(brand_id: Any) -> uuid.UUID | None:
    """Coerce an identifier to UUID; None when it cannot be one."""
    if isinstance(brand_id, uuid.UUID):
        return brand_id
    try:
        return uuid.UUID(str(brand_id))
    except (TypeError, ValueError):
        return None


def to_record(brand: Brand) -> dict[str, Any]:
    """Flatten a row into the record shape used by services and the API."""
    record = {"id": str(brand.id), **brand.document}
    # Row metadata wins over same-named legacy document keys
    record.update(
        id=str(brand.id),
        createdAt=brand.created_at,
        updatedAt=brand.updated_at,
        version=brand.version,
    )
    return record


def to_document(record: Mapping[str, Any]) -> dict[str, Any]:
    """Strip metadata keys; the remainder is what gets stored."""
    return {key: value for key, value in record.items() if key not in METADATA_FIELDS}


async def list_brand_records(db: AsyncSession) -> list[dict[str, Any]]:
    """Fetch every brand, oldest first."""
    result = await db.execute(select(Brand).order_by(Brand.created_at))
    return [to_record(brand) for brand in result.scalars().all()]


async def get_brand(db: AsyncSession, brand_id: Any) -> dict[str, Any] | None:
    """Fetch one brand by identifier."""
    key = parse_brand_id(brand_id)
    if key is None:
        return None
    brand = await db.get(Brand, key)
    return to_record(brand) if brand is not None else None


async def create_brand(db: AsyncSession, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Insert one brand document."""
    brand = Brand(document=to_document(fields), version=0)
    db.add(brand)
    await db.flush()
    await db.refresh(brand)
    return to_record(brand)


async def insert_many(
    db: AsyncSession,
    documents: Iterable[Mapping[str, Any]],
) -> list[dict[str, Any]]:
    """Insert several brand documents in one flush."""
    brands = [Brand(document=to_document(doc), version=0) for doc in documents]
    db.add_all(brands)
    await db.flush()
    for brand in brands:
        await db.refresh(brand)
    return [to_record(brand) for brand in brands]


async def update_fields(
    db: AsyncSession,
    brand_id: Any,
    fields: Mapping[str, Any],
) -> dict[str, Any] | None:
    """Merge `fields` into the stored document. None when the brand is missing."""
    key = parse_brand_id(brand_id)
    if key is None:
        return None
    brand = await db.get(Brand, key)
    if brand is None:
        return None

    document = {**brand.document, **to_document(fields)}
    if not same_values(document, brand.document):
        brand.document = document
        brand.version += 1
        await db.flush()
        await db.refresh(brand)
    return to_record(brand)


async def delete_brand(db: AsyncSession, brand_id: Any) -> bool:
    """Hard-delete a brand. Returns True if a row was deleted."""
    key = parse_brand_id(brand_id)
    if key is None:
        return False
    brand = await db.get(Brand, key)
    if brand is None:
        return False
    await db.delete(brand)
    await db.flush()
    return True


async def delete_all(db: AsyncSession) -> int:
    """Delete every brand and return the number of rows removed."""
    result = await db.execute(delete(Brand))
    await db.flush()
    return result.rowcount or 0


async def bulk_replace(db: AsyncSession, records: Iterable[Mapping[str, Any]]) -> int:
    """
    Replace each brand's document wholesale, matched by record id.

    Returns the number of rows whose document actually changed; a
    replacement identical to what is stored is not counted.
    """
    replacements: dict[uuid.UUID, dict[str, Any]] = {}
    for record in records:
        key = parse_brand_id(record.get("id"))
        if key is not None:
            replacements[key] = to_document(record)
    if not replacements:
        return 0

    result = await db.execute(select(Brand).where(Brand.id.in_(list(replacements))))
    modified = 0
    for brand in result.scalars().all():
        document = replacements[brand.id]
        if same_values(document, brand.document):
            continue
        brand.document = document
        brand.version += 1
        modified += 1

    await db.flush()
    return modified
