"""Shared constants and enums used across the application."""

from enum import StrEnum


class FieldCategory(StrEnum):
    """Category a failing field name is routed to during repair."""

    YEAR = "YEAR"
    LOCATIONS = "LOCATIONS"
    HEADQUARTERS = "HEADQUARTERS"
    BRAND_NAME = "BRAND_NAME"
    UNKNOWN = "UNKNOWN"


# ─── Canonical brand fields ───────────────────
BRAND_NAME = "brandName"
YEAR_FOUNDED = "yearFounded"
HEADQUARTERS = "headquarters"
NUMBER_OF_LOCATIONS = "numberOfLocations"

BUSINESS_FIELDS = (BRAND_NAME, YEAR_FOUNDED, HEADQUARTERS, NUMBER_OF_LOCATIONS)

# Stored outside the JSON document; stripped before a replace
METADATA_FIELDS = ("id", "createdAt", "updatedAt", "version")

# ─── Bounds ───────────────────────────────────
MIN_YEAR_FOUNDED = 1600
MIN_NUMBER_OF_LOCATIONS = 1
MAX_SEED_LOCATIONS = 100

# ─── Messages ─────────────────────────────────
NO_UPDATES_MESSAGE = "All brand data is already correct. No updates needed."
BRAND_NOT_FOUND_MESSAGE = "Brand not found!"
EXPORT_SHEET_TITLE = "Brand Data"
EXPORT_HEADERS = ("Brand Name", "Year Founded", "Headquarters", "Number of Locations")
