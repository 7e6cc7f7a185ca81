"""
Seed synthetic brands for development.
Run: python -m scripts.seed_brands [count]  (from backend/)
"""

import asyncio
import sys

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import standalone_session
from app.repositories.brands import insert_many
from app.services.brand_seeding import generate_brands_data
from app.services.excel_export import export_brands_to_excel


async def seed(count: int):
    """Generate, export and insert `count` brands."""
    brand_data = generate_brands_data(count, settings.SEED_BASE)
    path = export_brands_to_excel(brand_data, settings.BRAND_EXPORT_PATH)
    print(f"  Exported {len(brand_data)} brands to {path}")

    async with standalone_session() as session:
        brands = await insert_many(session, brand_data)
        for brand in brands:
            print(f"  Created brand: {brand['brandName']} ({brand['id']})")
    print(f"Seeded {len(brands)} brands.")


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    asyncio.run(seed(int(sys.argv[1]) if len(sys.argv) > 1 else settings.SEED_BRAND_COUNT))
