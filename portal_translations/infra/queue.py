"""
Job queue infrastructure

RQ queues used to run queue draining and backfills outside the request cycle.
"""

from typing import Optional

from redis import Redis
from rq import Queue

from portal_translations.core.config import settings
from portal_translations.infra.redis import get_sync_redis

# Backfill jobs run long
DEFAULT_JOB_TIMEOUT = 60 * 30


def get_job_queue(name: Optional[str] = None, connection: Optional[Redis] = None) -> Queue:
    """Return the named RQ queue (first configured worker queue by default)"""
    queue_name = name or settings.worker_queue_list[0]
    return Queue(
        queue_name,
        connection=connection or get_sync_redis(),
        default_timeout=DEFAULT_JOB_TIMEOUT,
    )
