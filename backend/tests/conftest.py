"""
Pytest configuration for the brands service tests.

The brand repository is swapped for an in-memory FakeBrandStore, so no
database is needed.  Service tests drive coroutines with asyncio.run();
API tests go through FastAPI's TestClient.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

import pytest
from sqlalchemy.exc import OperationalError

from app.repositories import brands as brand_repository
from app.validation.schema_validator import same_values

REPOSITORY_FUNCTIONS = (
    "list_brand_records",
    "get_brand",
    "create_brand",
    "insert_many",
    "update_fields",
    "delete_brand",
    "delete_all",
    "bulk_replace",
)


class FakeBrandStore:
    """In-memory stand-in for app.repositories.brands."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.write_calls = 0
        self.failing: set[str] = set()

    # ── Test helpers ──────────────────────────
    def add(self, document: Mapping[str, Any]) -> str:
        brand_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        self.rows[brand_id] = {
            "document": dict(document),
            "version": 0,
            "created_at": now,
            "updated_at": now,
        }
        return brand_id

    def record(self, brand_id: str) -> dict[str, Any]:
        row = self.rows[brand_id]
        return {
            "id": brand_id,
            **row["document"],
            "createdAt": row["created_at"],
            "updatedAt": row["updated_at"],
            "version": row["version"],
        }

    def document(self, brand_id: str) -> dict[str, Any]:
        return self.rows[brand_id]["document"]

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    # ── Repository surface ────────────────────
    async def list_brand_records(self, db) -> list[dict[str, Any]]:
        self._check("list_brand_records")
        return [self.record(brand_id) for brand_id in self.rows]

    async def get_brand(self, db, brand_id) -> dict[str, Any] | None:
        return self.record(brand_id) if brand_id in self.rows else None

    async def create_brand(self, db, fields) -> dict[str, Any]:
        return self.record(self.add(brand_repository.to_document(fields)))

    async def insert_many(self, db, documents: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
        self._check("insert_many")
        return [self.record(self.add(brand_repository.to_document(doc))) for doc in documents]

    async def update_fields(self, db, brand_id, fields) -> dict[str, Any] | None:
        if brand_id not in self.rows:
            return None
        row = self.rows[brand_id]
        row["document"] = {**row["document"], **brand_repository.to_document(fields)}
        row["version"] += 1
        return self.record(brand_id)

    async def delete_brand(self, db, brand_id) -> bool:
        return self.rows.pop(brand_id, None) is not None

    async def delete_all(self, db) -> int:
        count = len(self.rows)
        self.rows.clear()
        return count

    async def bulk_replace(self, db, records) -> int:
        self._check("bulk_replace")
        self.write_calls += 1
        modified = 0
        for record in records:
            row = self.rows.get(record["id"])
            document = brand_repository.to_document(record)
            if row is None or same_values(row["document"], document):
                continue
            row["document"] = document
            row["version"] += 1
            modified += 1
        return modified


@pytest.fixture
def store(monkeypatch) -> FakeBrandStore:
    """Patch the brand repository with a fresh in-memory store."""
    fake = FakeBrandStore()
    for name in REPOSITORY_FUNCTIONS:
        monkeypatch.setattr(brand_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def export_path(tmp_path, monkeypatch) -> str:
    """Send Excel exports to a temp file."""
    from app.core.config import settings

    path = str(tmp_path / "brand_data.xlsx")
    monkeypatch.setattr(settings, "BRAND_EXPORT_PATH", path)
    return path


@pytest.fixture
def client(store, export_path):
    """TestClient with the DB dependency stubbed out."""
    from fastapi.testclient import TestClient

    from app.api.deps import get_db
    from app.main import app

    async def _no_db():
        yield None

    app.dependency_overrides[get_db] = _no_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_brand() -> dict[str, Any]:
    return {
        "brandName": "Acme",
        "yearFounded": 1950,
        "headquarters": "NYC",
        "numberOfLocations": 5,
    }
