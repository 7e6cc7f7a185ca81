"""Brand CRUD, seeding and repair endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.services import brands_service

router = APIRouter(prefix="/brands", tags=["Brands"])


# Fixed paths are registered before "/{brand_id}" so they are matched first
@router.patch("/validate-and-update")
async def validate_and_update(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Repair stored brands that do not conform to the brand schema."""
    return await brands_service.validate_and_update(db)


@router.post("/seed-data", status_code=status.HTTP_201_CREATED)
async def seed_data(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Generate, export and insert synthetic brands."""
    return await brands_service.seed_data(db)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_brand(
    payload: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return await brands_service.create_brand(db, payload)


@router.get("")
async def list_brands(db: AsyncSession = Depends(get_db)) -> list[dict[str, Any]]:
    return await brands_service.list_brands(db)


@router.delete("")
async def delete_all_brands(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    return await brands_service.delete_all_brands(db)


@router.get("/{brand_id}")
async def get_brand(brand_id: str, db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    return await brands_service.get_brand(db, brand_id)


@router.patch("/{brand_id}")
async def update_brand(
    brand_id: str,
    payload: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return await brands_service.update_brand(db, brand_id, payload)


@router.delete("/{brand_id}")
async def delete_brand(brand_id: str, db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    return await brands_service.delete_brand(db, brand_id)
