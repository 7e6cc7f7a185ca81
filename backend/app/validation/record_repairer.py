"""
Record repair — rewrite a malformed stored brand so it fits the schema.

Each validation issue is routed by `classify_field` to a correction.
Corrections are pure `(record, issue) -> record` functions folded left to
right over the issue list, so a later correction for the same canonical
field overwrites an earlier one.

A record with no business field left after the fold is dropped
(`repair_record` returns None).
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from app.core.constants import (
    BRAND_NAME,
    BUSINESS_FIELDS,
    HEADQUARTERS,
    NUMBER_OF_LOCATIONS,
    YEAR_FOUNDED,
    FieldCategory,
)
from app.validation.field_classifier import classify_field
from app.validation.schema_validator import ValidationIssue, validate_record
from app.validation.schemas import BrandDocument, is_valid_location_count, is_valid_year

Record = dict[str, Any]
Correction = Callable[[Record, ValidationIssue], Record]


def parse_number(value: Any) -> float | None:
    """Return `value` as a finite number if it is one or spells one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _numeric_correction(target: str, accepts: Callable[[int], bool]) -> Correction:
    def correct(record: Record, issue: ValidationIssue) -> Record:
        corrected = dict(record)
        number = parse_number(issue.raw_value)
        if number is not None and accepts(int(number)):
            corrected[target] = int(number)
        elif issue.field_name == target:
            # Unsalvageable canonical value: fall back to the schema default
            corrected.pop(target, None)
        if issue.field_name != target:
            corrected.pop(issue.field_name, None)
        return corrected

    return correct


def correct_headquarters(record: Record, issue: ValidationIssue) -> Record:
    corrected = dict(record)
    value = issue.raw_value
    if isinstance(value, str) and value.strip() and parse_number(value) is None:
        corrected[HEADQUARTERS] = value.strip()
    if issue.field_name != HEADQUARTERS:
        corrected.pop(issue.field_name, None)
    return corrected


def _find_nested_brand(record: Mapping[str, Any]) -> str | None:
    """Key of a legacy `{"brand": {"name": ...}}` style entry, if any."""
    for key, value in record.items():
        if "brand" not in key.lower() or not isinstance(value, Mapping):
            continue
        name = value.get("name")
        if isinstance(name, str) and name.strip():
            return key
    return None


def correct_brand_name(record: Record, issue: ValidationIssue) -> Record:
    corrected = dict(record)
    nested_key = _find_nested_brand(corrected)
    if nested_key is not None:
        corrected[BRAND_NAME] = corrected[nested_key]["name"].strip()
        if nested_key != BRAND_NAME:
            corrected.pop(nested_key)
    elif issue.field_name == BRAND_NAME:
        corrected.pop(BRAND_NAME, None)
    if issue.field_name != BRAND_NAME:
        corrected.pop(issue.field_name, None)
    return corrected


def drop_field(record: Record, issue: ValidationIssue) -> Record:
    corrected = dict(record)
    corrected.pop(issue.field_name, None)
    return corrected


CORRECTIONS: dict[FieldCategory, Correction] = {
    FieldCategory.YEAR: _numeric_correction(YEAR_FOUNDED, is_valid_year),
    FieldCategory.LOCATIONS: _numeric_correction(NUMBER_OF_LOCATIONS, is_valid_location_count),
    FieldCategory.HEADQUARTERS: correct_headquarters,
    FieldCategory.BRAND_NAME: correct_brand_name,
    FieldCategory.UNKNOWN: drop_field,
}


def apply_correction(record: Record, issue: ValidationIssue) -> Record:
    """Apply the correction for the issue's field category."""
    return CORRECTIONS[classify_field(issue.field_name)](record, issue)


def repair_record(
    record: Mapping[str, Any],
    schema: type[BaseModel] = BrandDocument,
) -> Record | None:
    """
    Repair one record.

    Returns the normalized record when it is (or becomes) valid, the
    corrected-but-still-invalid record otherwise, or None when no
    business field survives the corrections.
    """
    outcome = validate_record(record, schema)
    if outcome.ok:
        return outcome.value

    repaired = reduce(apply_correction, outcome.issues, dict(record))
    if not any(name in repaired for name in BUSINESS_FIELDS):
        return None

    revalidated = validate_record(repaired, schema)
    return revalidated.value if revalidated.ok else repaired
