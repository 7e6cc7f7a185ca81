"""
Celery configuration for the brands service.

Loaded by `celery_app.config_from_object("celeryconfig")` in app/tasks/__init__.py.
All broker/result-backend URLs come from environment variables,
defaulting to localhost for local dev.
"""

import os

# ═══════════════════════════════════════════════════════════
#  Broker & Result Backend
# ═══════════════════════════════════════════════════════════

broker_url = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
result_backend = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")

# ═══════════════════════════════════════════════════════════
#  Serialization — JSON only
# ═══════════════════════════════════════════════════════════

task_serializer = "json"
result_serializer = "json"
accept_content = ["json"]

# ═══════════════════════════════════════════════════════════
#  Timezone
# ═══════════════════════════════════════════════════════════

timezone = "UTC"
enable_utc = True

# ═══════════════════════════════════════════════════════════
#  Task Execution
# ═══════════════════════════════════════════════════════════

task_acks_late = True
task_reject_on_worker_lost = True
worker_prefetch_multiplier = 1

# A repair pass reads and rewrites the whole collection
task_soft_time_limit = 600
task_time_limit = 660

result_expires = 86400

# ═══════════════════════════════════════════════════════════
#  Task Routes
# ═══════════════════════════════════════════════════════════
#   celery -A app.tasks worker -Q maintenance

task_routes = {
    "app.tasks.repair_tasks.*": {"queue": "maintenance"},
}

task_default_queue = "default"

# ═══════════════════════════════════════════════════════════
#  Beat Schedule (periodic tasks)
# ═══════════════════════════════════════════════════════════

_repair_interval = int(os.getenv("BRAND_REPAIR_INTERVAL_SECONDS", "0"))

beat_schedule = {}
if _repair_interval > 0:
    beat_schedule["repair-brands"] = {
        "task": "app.tasks.repair_tasks.repair_brands",
        "schedule": float(_repair_interval),
    }
