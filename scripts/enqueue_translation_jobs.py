"""
Script to enqueue translation jobs on the RQ queue.

Meant to be run from cron, e.g. every 5 minutes:
    python scripts/enqueue_translation_jobs.py queue
and nightly:
    python scripts/enqueue_translation_jobs.py backfill
"""

import argparse
import os
import sys

sys.path.append(os.getcwd())

from portal_translations.core.logging import get_logger, setup_logging
from portal_translations.infra.queue import get_job_queue
from portal_translations.workers.jobs.translation_queue import (
    backfill_translations,
    process_translation_queue,
)

logger = get_logger(__name__)

JOBS = {
    "queue": process_translation_queue,
    "backfill": backfill_translations,
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Enqueue a translation job")
    parser.add_argument("job", choices=sorted(JOBS), help="Job to enqueue")
    parser.add_argument("--queue-name", default=None, help="RQ queue (default: first WORKER_QUEUES entry)")
    args = parser.parse_args()

    setup_logging()
    queue = get_job_queue(args.queue_name)
    job = queue.enqueue(JOBS[args.job])
    logger.info(f"Enqueued {args.job} job {job.id} on '{queue.name}'")


if __name__ == "__main__":
    main()
