"""
Unit tests for app.repositories.brands.

The SQL itself is not exercised here; a stub AsyncSession hands back
Brand instances so the row-level logic (record shape, change detection,
version bumps) can run without a database.
"""

import asyncio
import uuid
from datetime import datetime, timezone

import pytest

from app.db.models.brand import Brand
from app.repositories import brands as brand_repository


def run(coro):
    return asyncio.run(coro)


def make_brand(document, version=0):
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return Brand(
        id=uuid.uuid4(),
        document=document,
        version=version,
        created_at=stamp,
        updated_at=stamp,
    )


class StubResult:

    def __init__(self, rows):
        self.rows = rows

    def scalars(self):
        return self

    def all(self):
        return list(self.rows)


class StubSession:
    """Just enough of AsyncSession for the repository functions."""

    def __init__(self, brands=()):
        self.brands = {brand.id: brand for brand in brands}
        self.executed = 0
        self.flushes = 0

    async def execute(self, statement):
        self.executed += 1
        return StubResult(self.brands.values())

    async def get(self, model, key):
        return self.brands.get(key)

    async def flush(self):
        self.flushes += 1

    async def refresh(self, instance):
        return None


@pytest.mark.unit
class TestRecordShape:

    def test_row_metadata_overrides_document_keys(self, valid_brand):
        brand = make_brand({**valid_brand, "id": "legacy", "version": 99}, version=3)
        record = brand_repository.to_record(brand)
        assert record["id"] == str(brand.id)
        assert record["version"] == 3
        assert record["createdAt"] == brand.created_at
        assert record["brandName"] == "Acme"

    def test_to_document_strips_metadata(self, valid_brand):
        record = {
            "id": "b-1",
            **valid_brand,
            "createdAt": "x",
            "updatedAt": "y",
            "version": 2,
        }
        assert brand_repository.to_document(record) == valid_brand

    def test_to_document_keeps_unknown_keys(self):
        assert brand_repository.to_document({"id": "b-1", "notes": "x"}) == {"notes": "x"}


@pytest.mark.unit
class TestParseBrandId:

    def test_uuid_string(self):
        key = uuid.uuid4()
        assert brand_repository.parse_brand_id(str(key)) == key

    def test_uuid_instance_passes_through(self):
        key = uuid.uuid4()
        assert brand_repository.parse_brand_id(key) is key

    @pytest.mark.parametrize("value", ["not-a-uuid", "", None, 42])
    def test_bad_ids_become_none(self, value):
        assert brand_repository.parse_brand_id(value) is None

    def test_bad_id_never_reaches_the_session(self):
        # db=None would raise AttributeError if it were touched
        assert run(brand_repository.get_brand(None, "nope")) is None
        assert run(brand_repository.update_fields(None, "nope", {"headquarters": "Oslo"})) is None
        assert run(brand_repository.delete_brand(None, "nope")) is False


@pytest.mark.unit
class TestUpdateFields:

    def test_change_bumps_version(self, valid_brand):
        brand = make_brand(dict(valid_brand))
        db = StubSession([brand])
        record = run(brand_repository.update_fields(db, str(brand.id), {"headquarters": "Oslo"}))
        assert record["headquarters"] == "Oslo"
        assert brand.version == 1

    def test_identical_update_is_a_no_op(self, valid_brand):
        brand = make_brand(dict(valid_brand))
        db = StubSession([brand])
        run(brand_repository.update_fields(db, str(brand.id), {"headquarters": "NYC"}))
        assert brand.version == 0
        assert db.flushes == 0

    def test_float_to_int_counts_as_change(self, valid_brand):
        brand = make_brand({**valid_brand, "yearFounded": 1950.0})
        db = StubSession([brand])
        run(brand_repository.update_fields(db, str(brand.id), {"yearFounded": 1950}))
        assert type(brand.document["yearFounded"]) is int
        assert brand.version == 1

    def test_missing_brand(self):
        assert run(brand_repository.update_fields(StubSession(), str(uuid.uuid4()), {})) is None


@pytest.mark.unit
class TestBulkReplace:

    def test_counts_only_changed_documents(self, valid_brand):
        stale = make_brand({**valid_brand, "yearFounded": "1950"})
        current = make_brand(dict(valid_brand))
        db = StubSession([stale, current])

        modified = run(brand_repository.bulk_replace(db, [
            {"id": str(stale.id), **valid_brand, "version": 0},
            {"id": str(current.id), **valid_brand, "version": 0},
        ]))

        assert modified == 1
        assert stale.document == valid_brand
        assert stale.version == 1
        assert current.version == 0
        assert db.flushes == 1

    def test_whole_number_float_is_replaced(self, valid_brand):
        brand = make_brand({**valid_brand, "yearFounded": 1950.0, "numberOfLocations": 5.0})
        db = StubSession([brand])
        modified = run(brand_repository.bulk_replace(db, [{"id": str(brand.id), **valid_brand}]))
        assert modified == 1
        assert type(brand.document["numberOfLocations"]) is int

    def test_metadata_is_not_written_into_the_document(self, valid_brand):
        brand = make_brand({**valid_brand, "headquarters": " NYC "})
        db = StubSession([brand])
        run(brand_repository.bulk_replace(db, [
            {"id": str(brand.id), **valid_brand, "createdAt": brand.created_at, "version": 0},
        ]))
        assert set(brand.document) == set(valid_brand)

    def test_unparseable_ids_skip_the_query(self, valid_brand):
        db = StubSession()
        assert run(brand_repository.bulk_replace(db, [{"id": "legacy-1", **valid_brand}])) == 0
        assert db.executed == 0
