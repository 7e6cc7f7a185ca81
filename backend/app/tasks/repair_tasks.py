"""
Celery tasks — brand schema-conformance repair.

Runs the same pass as PATCH /brands/validate-and-update, outside a
request.  Scheduled by beat when BRAND_REPAIR_INTERVAL_SECONDS > 0.
"""

import asyncio

import structlog

from app.db.session import standalone_session
from app.services import brands_service
from app.tasks import celery_app

logger = structlog.get_logger("tasks.repair")


async def _run_repair() -> dict:
    """Run one repair pass on a fresh engine (avoids loop conflicts)."""
    async with standalone_session() as session:
        return await brands_service.validate_and_update(session)


@celery_app.task(bind=True, name="app.tasks.repair_tasks.repair_brands")
def repair_brands(self):
    """Repair every stored brand that does not conform to the schema."""
    task_log = logger.bind(task_id=self.request.id)
    task_log.info("Brand repair task started")

    try:
        result = asyncio.run(_run_repair())
    except Exception as exc:
        task_log.exception("Brand repair task failed", error=str(exc))
        raise

    task_log.info("Brand repair task finished", message=result["message"])
    return result
