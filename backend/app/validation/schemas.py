"""
Declarative brand schemas.

Three shapes of the same entity:
    BrandDocument — a stored brand as read back from the database,
                    including metadata keys; the repair target.
    BrandCreate   — payload accepted by POST /brands.
    BrandUpdate   — payload accepted by PATCH /brands/{id}; all optional,
                    but a provided field may not be null.

Keys are the camelCase names stored in the document.  Unknown keys are
rejected so the validator reports them alongside type and bound errors.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import MIN_NUMBER_OF_LOCATIONS, MIN_YEAR_FOUNDED


def current_year() -> int:
    return date.today().year


def is_valid_year(value: int) -> bool:
    return MIN_YEAR_FOUNDED <= value <= current_year()


def is_valid_location_count(value: int) -> bool:
    return value >= MIN_NUMBER_OF_LOCATIONS


class _BrandFields(BaseModel):
    """Shared config and field checks."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    @field_validator("year_founded", "number_of_locations", mode="before", check_fields=False)
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("Input should be a valid number")
        return value

    @field_validator("year_founded", check_fields=False)
    @classmethod
    def _not_in_future(cls, value: int | None) -> int | None:
        if value is not None and value > current_year():
            raise ValueError(f"Year founded cannot be after {current_year()}")
        return value


class BrandDocument(_BrandFields):
    id: Any = None
    brand_name: str = Field(alias="brandName", min_length=1)
    headquarters: str = Field(min_length=1)
    year_founded: int = Field(
        default=MIN_YEAR_FOUNDED, alias="yearFounded", ge=MIN_YEAR_FOUNDED
    )
    number_of_locations: int = Field(
        default=MIN_NUMBER_OF_LOCATIONS,
        alias="numberOfLocations",
        ge=MIN_NUMBER_OF_LOCATIONS,
    )
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    version: int | None = None


class BrandCreate(_BrandFields):
    brand_name: str = Field(alias="brandName", min_length=1)
    headquarters: str = Field(min_length=1)
    year_founded: int = Field(alias="yearFounded", ge=MIN_YEAR_FOUNDED)
    number_of_locations: int = Field(
        alias="numberOfLocations", ge=MIN_NUMBER_OF_LOCATIONS
    )


class BrandUpdate(_BrandFields):
    brand_name: str | None = Field(default=None, alias="brandName", min_length=1)
    headquarters: str | None = Field(default=None, min_length=1)
    year_founded: int | None = Field(
        default=None, alias="yearFounded", ge=MIN_YEAR_FOUNDED
    )
    number_of_locations: int | None = Field(
        default=None, alias="numberOfLocations", ge=MIN_NUMBER_OF_LOCATIONS
    )

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Omitted fields keep their stored value; an explicit null is an error
        if value is None:
            raise ValueError("Field cannot be null")
        return value
