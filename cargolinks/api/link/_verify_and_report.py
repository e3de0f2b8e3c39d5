"""Worker job body: verify one link, then hand it to the aggregator."""

import queue
from typing import Any

from ...logging_config import get_logger
from .Link import Link
from .LinkStatus import Unreachable
from .verify_link import verify_link

logger = get_logger("link.job")


def _verify_and_report(link: Link, client: Any, timeout: float, results: queue.Queue) -> None:
    """Verify ``link`` and put it on ``results`` exactly once.

    The aggregator waits for one result per submitted link, so the put
    happens even if verification itself fails. Such a failure is logged
    and recorded on the link; nothing is left on the job's future.
    """
    try:
        verify_link(link, client, timeout)
    except BaseException as exc:
        logger.exception(f"Verification of {link} did not complete")
        if not link.is_verified:
            link.status = Unreachable(f"verification did not complete: {type(exc).__name__}: {exc}")
    finally:
        results.put(link)
