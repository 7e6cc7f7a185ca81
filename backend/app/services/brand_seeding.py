"""
Synthetic brand generation for development and demos.

Record i is drawn from a Faker instance seeded with `seed_base + i`, so
the same (count, seed_base) always yields the same brands and growing
the count only appends new ones.
"""

from __future__ import annotations

from typing import Any

from faker import Faker

from app.core.constants import (
    BRAND_NAME,
    HEADQUARTERS,
    MAX_SEED_LOCATIONS,
    MIN_NUMBER_OF_LOCATIONS,
    MIN_YEAR_FOUNDED,
    NUMBER_OF_LOCATIONS,
    YEAR_FOUNDED,
)
from app.validation.schemas import current_year


def generate_brand(seed: int) -> dict[str, Any]:
    """Generate one schema-conformant brand from `seed`."""
    fake = Faker()
    fake.seed_instance(seed)
    return {
        BRAND_NAME: fake.company(),
        YEAR_FOUNDED: fake.random_int(MIN_YEAR_FOUNDED, current_year()),
        HEADQUARTERS: fake.city(),
        NUMBER_OF_LOCATIONS: fake.random_int(MIN_NUMBER_OF_LOCATIONS, MAX_SEED_LOCATIONS),
    }


def generate_brands_data(count: int, seed_base: int = 100) -> list[dict[str, Any]]:
    """Generate `count` brands deterministically."""
    return [generate_brand(seed_base + offset) for offset in range(count)]
