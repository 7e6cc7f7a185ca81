"""
Batch repair — run the record repairer over every stored brand.

Only records that come out valid AND differ from what is stored are
returned for writing.  Dropped records (nothing salvageable) and
rejected records (still invalid after repair) are counted and logged,
never written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from app.core.logging import get_logger
from app.validation.record_repairer import repair_record
from app.validation.schema_validator import same_values, validate_record
from app.validation.schemas import BrandDocument

logger = get_logger(__name__)


@dataclass
class BatchRepairResult:
    """Outcome of one repair pass over a batch of records."""

    corrected: list[dict[str, Any]] = field(default_factory=list)
    unchanged: int = 0
    dropped: int = 0
    rejected: int = 0

    @property
    def total(self) -> int:
        return len(self.corrected) + self.unchanged + self.dropped + self.rejected


def repair_batch(
    records: Iterable[Mapping[str, Any]],
    schema: type[BaseModel] = BrandDocument,
) -> BatchRepairResult:
    """Repair each record, re-validate the survivors, keep the changed ones."""
    result = BatchRepairResult()

    for record in records:
        record_id = record.get("id")
        repaired = repair_record(record, schema)
        if repaired is None:
            result.dropped += 1
            logger.warning("Brand dropped, no usable fields left", brand_id=record_id)
            continue

        outcome = validate_record(repaired, schema)
        if not outcome.ok:
            result.rejected += 1
            logger.warning(
                "Brand still invalid after repair, skipping",
                brand_id=record_id,
                errors=outcome.summary(),
            )
            continue

        if same_values(outcome.value, dict(record)):
            result.unchanged += 1
            continue

        result.corrected.append(outcome.value)

    logger.info(
        "Brand repair pass complete",
        total=result.total,
        corrected=len(result.corrected),
        unchanged=result.unchanged,
        dropped=result.dropped,
        rejected=result.rejected,
    )
    return result
