"""Link API domain: discovery, verification and reporting of links."""

from .aggregate_results import aggregate_results
from .CheckResult import CheckResult
from .classify_target import classify_target
from .Dispatcher import Dispatcher
from .Link import Link
from .LinkStatus import LinkStatus, Questionable, Reachable, Unreachable
from .LinkStatusError import LinkStatusError
from .scan_tree import scan_tree
from .verify_link import verify_link

__all__ = [
    "CheckResult",
    "Dispatcher",
    "Link",
    "LinkStatus",
    "LinkStatusError",
    "Questionable",
    "Reachable",
    "Unreachable",
    "aggregate_results",
    "classify_target",
    "scan_tree",
    "verify_link",
]
