"""
Domain-specific exception hierarchy for the brands service.

All service exceptions inherit from BrandServiceError so the API layer
can map them to HTTP responses in one handler.  Each exception carries
the status code it surfaces as and optional structured details for
logging.
"""

from __future__ import annotations


class BrandServiceError(Exception):
    """Base exception for all brand service errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class BrandValidationError(BrandServiceError):
    """Create/update input failed schema validation."""

    status_code = 400


class BrandNotFoundError(BrandServiceError):
    """The targeted brand identifier does not exist."""

    status_code = 404


class BrandStorageError(BrandServiceError):
    """Fetching from or writing to the brand store failed."""

    status_code = 500


class BrandExportError(BrandServiceError):
    """Writing the Excel export of seeded brands failed."""

    status_code = 500
