"""Route a failing field name to the canonical field it most likely means."""

from __future__ import annotations

from app.core.constants import FieldCategory

# Checked in order; the first anchor contained in the lower-cased name wins
FIELD_ANCHORS: tuple[tuple[str, FieldCategory], ...] = (
    ("year", FieldCategory.YEAR),
    ("locations", FieldCategory.LOCATIONS),
    ("hqaddress", FieldCategory.HEADQUARTERS),
    ("brandname", FieldCategory.BRAND_NAME),
)


def classify_field(field_name: str) -> FieldCategory:
    """Classify a field name by case-insensitive substring match."""
    lowered = field_name.lower()
    for anchor, category in FIELD_ANCHORS:
        if anchor in lowered:
            return category
    return FieldCategory.UNKNOWN
