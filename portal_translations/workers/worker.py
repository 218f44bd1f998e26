"""
Worker Entry Point

Starts the Redis Queue (RQ) worker that runs queue draining and backfills.
"""

from rq import Queue, Worker

from portal_translations.core.config import settings
from portal_translations.core.logging import get_logger, setup_logging
from portal_translations.infra.redis import get_sync_redis

logger = get_logger(__name__)


def main() -> None:
    setup_logging()

    listen = settings.worker_queue_list
    conn = get_sync_redis()

    worker = Worker([Queue(name, connection=conn) for name in listen], connection=conn)
    logger.info(f"Worker started. Listening on: {listen}")
    worker.work()


if __name__ == "__main__":
    main()
