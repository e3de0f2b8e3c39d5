"""Find links in a source tree and submit one verification job per link."""

import os
import queue
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ...logging_config import get_logger
from ..ScanError import ScanError
from ._parsers import get_parser
from ._verify_and_report import _verify_and_report
from .Dispatcher import Dispatcher
from .Link import Link
from .path_text import path_text

logger = get_logger("link.scan")


def scan_tree(
    files: Iterable[Path],
    dispatcher: Dispatcher,
    client: Any,
    results: queue.Queue,
    display: Any,
    timeout: float,
) -> int:
    """Scan ``files`` line by line and dispatch every link found.

    The scan runs on the calling thread and never waits on the network:
    it only submits jobs. The link counter is incremented before each
    submission, so the returned count is exactly the number of results the
    aggregator has to drain.

    Args:
        files: Files to scan, usually from ``walk_files``
        dispatcher: Pool that runs the verification jobs
        client: Shared HTTP session handed to every job
        results: Queue the jobs put verified links on
        display: Receives a warning for each skipped file
        timeout: Per-request timeout passed to the verifier

    Returns:
        Number of links submitted

    Raises:
        ScanError: If a file cannot be read or is not valid UTF-8
    """
    n_links = 0
    for path in files:
        source_path = path_text(path)
        if source_path is None:
            shown = os.fsencode(path).decode("utf-8", errors="replace")
            display.warning(f"Filename is not valid unicode, skipping: {shown}", err=True)
            continue

        logger.debug(f"Searching {source_path}")
        parser = get_parser(file_path=path)
        try:
            with path.open(encoding="utf-8", newline="") as fh:
                text = fh.read()
        except UnicodeDecodeError as exc:
            raise ScanError(f"File is not valid UTF-8: {source_path}: {exc}", path=source_path) from exc
        except OSError as exc:
            raise ScanError(f"Cannot read {source_path}: {exc}", path=source_path) from exc

        # Only "\n" ends a line; a lone "\r" stays part of it
        for line_number, line in enumerate(text.split("\n"), start=1):
            for ref in parser.parse_line(line, line_number):
                n_links += 1
                link = Link(source_path, ref.line_number, ref.raw_target)
                dispatcher.submit(_verify_and_report, link, client, timeout, results)

    logger.debug(f"Submitted {n_links} links")
    return n_links
