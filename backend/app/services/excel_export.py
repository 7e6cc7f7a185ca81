"""Excel export of brand records (openpyxl)."""

from __future__ import annotations

import os
from typing import Any, Iterable, Mapping

from openpyxl import Workbook

from app.core.constants import (
    BRAND_NAME,
    EXPORT_HEADERS,
    EXPORT_SHEET_TITLE,
    HEADQUARTERS,
    NUMBER_OF_LOCATIONS,
    YEAR_FOUNDED,
)
from app.core.errors import BrandExportError
from app.core.logging import get_logger

logger = get_logger(__name__)

EXPORT_COLUMNS = (BRAND_NAME, YEAR_FOUNDED, HEADQUARTERS, NUMBER_OF_LOCATIONS)


def export_brands_to_excel(brands: Iterable[Mapping[str, Any]], path: str) -> str:
    """
    Write `brands` to a workbook at `path` and return the path.

    One header row, then one row per brand in EXPORT_COLUMNS order.
    Raises BrandExportError when the file cannot be written.
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = EXPORT_SHEET_TITLE
    worksheet.append(list(EXPORT_HEADERS))

    rows = 0
    for brand in brands:
        worksheet.append([brand.get(column) for column in EXPORT_COLUMNS])
        rows += 1

    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        workbook.save(path)
    except OSError as exc:
        logger.exception("Brand export failed", path=path)
        raise BrandExportError(
            "Failed to write brand export", details={"path": path}
        ) from exc

    logger.info("Brand data exported", path=path, rows=rows)
    return path
