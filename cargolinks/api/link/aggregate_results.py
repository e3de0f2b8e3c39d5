"""Drain verified links from the result queue and report them."""

import queue
from typing import Any

from .CheckResult import CheckResult
from .LinkStatus import Questionable, Reachable, Unreachable


def aggregate_results(results: queue.Queue, n_links: int, display: Any) -> CheckResult:
    """Report each of the ``n_links`` results in arrival order.

    Blocks until exactly ``n_links`` links have been received. Every link
    gets one line: success for reachable, warning for questionable, error
    for unreachable. A summary error line follows if any link is bad.

    Args:
        results: Queue that worker jobs put completed links on
        n_links: Number of links the scanner submitted
        display: Object with ``success``, ``warning`` and ``error`` methods

    Returns:
        CheckResult with the per-outcome counts
    """
    totals = CheckResult(n_links=n_links)

    for _ in range(n_links):
        link = results.get()
        status = link.status
        if isinstance(status, Reachable):
            totals.n_reachable += 1
            display.success(f"✓ {link}")
        elif isinstance(status, Questionable):
            totals.n_questionable += 1
            display.warning(f"✓ {link} ({status.reason})")
        elif isinstance(status, Unreachable):
            totals.n_bad_links += 1
            if status.reason:
                display.error(f"✗ {link} ({status.reason})")
            else:
                display.error(f"✗ {link}")
        else:
            raise TypeError(f"Link {link} arrived without a terminal status: {status!r}")

    if totals.n_bad_links > 0:
        display.error(f"Found {totals.n_bad_links} bad links")

    return totals
