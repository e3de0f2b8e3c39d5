"""Link check pipeline: scan, verify concurrently, aggregate."""

import queue
from typing import Any

from ...logging_config import get_logger
from ..config.CheckConfig import CheckConfig
from ..walk.walk_files import walk_files
from .aggregate_results import aggregate_results
from .build_http_client import build_http_client
from .CheckResult import CheckResult
from .Dispatcher import Dispatcher
from .scan_tree import scan_tree

logger = get_logger("link.check")


def cmd_check(config: CheckConfig, display: Any, client: Any | None = None) -> CheckResult:
    """Check every link under ``config.root``.

    One HTTP session is created before any job is dispatched (unless
    ``client`` is given) and shared by all jobs. Jobs are dispatched while
    the tree is still being scanned; once the scan is done the number of
    submitted links is known and exactly that many results are drained.

    Raises:
        ScanError: If the tree or one of its files cannot be read
    """
    owns_client = client is None
    if client is None:
        client = build_http_client(config.concurrency, config.user_agent)

    results: queue.Queue = queue.Queue()
    try:
        with Dispatcher(config.concurrency) as dispatcher:
            n_links = scan_tree(
                walk_files(config.root, config.include_globs),
                dispatcher,
                client,
                results,
                display,
                config.timeout,
            )
            result = aggregate_results(results, n_links, display)
            logger.debug(
                f"Checked {result.n_links} links: {result.n_reachable} reachable, "
                f"{result.n_questionable} questionable, {result.n_bad_links} bad"
            )
            return result
    finally:
        if owns_client:
            client.close()
