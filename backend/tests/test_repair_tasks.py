"""Tests for the Celery repair task (executed in-process, no broker)."""

import pytest

from app.core.constants import NO_UPDATES_MESSAGE
from app.tasks import repair_tasks


class TestRepairBrandsTask:

    def test_returns_service_result(self, monkeypatch):
        async def fake_run():
            return {"statusCode": 200, "message": NO_UPDATES_MESSAGE}

        monkeypatch.setattr(repair_tasks, "_run_repair", fake_run)

        assert repair_tasks.repair_brands() == {"statusCode": 200, "message": NO_UPDATES_MESSAGE}

    def test_failure_propagates(self, monkeypatch):
        async def failing_run():
            raise RuntimeError("db unavailable")

        monkeypatch.setattr(repair_tasks, "_run_repair", failing_run)

        with pytest.raises(RuntimeError):
            repair_tasks.repair_brands()

    def test_registered_name(self):
        assert repair_tasks.repair_brands.name == "app.tasks.repair_tasks.repair_brands"
