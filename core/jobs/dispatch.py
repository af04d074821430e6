"""Deferred job dispatch.

Jobs are enqueued only after the surrounding transaction commits, so a
rolled-back operation never fans out. Enqueue failures are logged and
swallowed; the triggering operation has already succeeded and deferred work
is best-effort with no retry.
"""

from typing import Any

from django.db import transaction

import django_rq
import structlog

from core.logging.context import get_request_id

logger = structlog.get_logger(__name__)

QUEUE_NAME = "default"


def enqueue_now(func_path: str, *args: Any) -> bool:
    """Enqueue a job immediately.

    Args:
        func_path: Dotted path of the job function.
        *args: Positional job arguments (must be picklable).

    Returns:
        True if the job reached the queue.
    """
    request_id = get_request_id()
    try:
        queue = django_rq.get_queue(QUEUE_NAME)
        job = queue.enqueue(
            func_path,
            *args,
            meta={"request_id": request_id} if request_id else {},
        )
    except Exception as e:
        logger.error(
            "job_enqueue_failed",
            func=func_path,
            args=[str(arg) for arg in args],
            error=str(e),
        )
        return False

    logger.debug("job_enqueued", func=func_path, job_id=job.id)
    return True


def defer(func_path: str, *args: Any) -> None:
    """Enqueue a job once the current transaction commits.

    Outside a transaction the job is enqueued right away.
    """
    transaction.on_commit(lambda: enqueue_now(func_path, *args))
