"""Bounded worker pool for verification jobs."""

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from ...logging_config import get_logger

logger = get_logger("link.dispatcher")

DEFAULT_CONCURRENCY = 10


class Dispatcher:
    """Runs submitted jobs on at most ``concurrency`` worker threads.

    Jobs beyond the limit wait in the executor's queue until a worker frees
    up. There is no ordering guarantee between jobs, and the dispatcher
    never looks at what a job returns: jobs report through their own
    channel. Leaving the context waits for every submitted job.
    """

    def __init__(self, concurrency: int = DEFAULT_CONCURRENCY):
        if concurrency < 1:
            raise ValueError(f"concurrency must be a positive integer, got {concurrency}")
        self.concurrency = concurrency
        self.submitted = 0
        self._executor = ThreadPoolExecutor(max_workers=concurrency, thread_name_prefix="cargo-links-worker")

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Pending jobs are dropped only when the caller is already failing
        self.shutdown(wait=True, cancel_pending=exc_type is not None)
        return False

    def submit(self, job: Callable[..., Any], *args: Any) -> Future:
        """Queue ``job(*args)`` for a worker."""
        self.submitted += 1
        return self._executor.submit(job, *args)

    def shutdown(self, wait: bool = True, cancel_pending: bool = False) -> None:
        logger.debug(f"Shutting down dispatcher after {self.submitted} jobs")
        self._executor.shutdown(wait=wait, cancel_futures=cancel_pending)
