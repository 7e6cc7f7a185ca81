"""
Run one schema-conformance repair pass against the database.
Run: python -m scripts.repair_brands  (from backend/)
"""

import asyncio

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import standalone_session
from app.services.brands_service import validate_and_update


async def repair():
    async with standalone_session() as session:
        result = await validate_and_update(session)
    print(result["message"])


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    asyncio.run(repair())
