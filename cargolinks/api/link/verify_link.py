"""Verify a single link and record the outcome on it."""

from typing import Any

import requests  # type: ignore

from ...logging_config import get_logger
from .classify_target import classify_target
from .Link import Link
from .LinkStatus import LinkStatus, Reachable, Unreachable
from .normalize_target import normalize_target

logger = get_logger("link.verify")

DEFAULT_TIMEOUT = 10.0


def _check_url(url: str, client: Any, timeout: float) -> LinkStatus:
    """Issue a single GET and map the response onto a status.

    Redirects are followed; only the final status code counts. The body is
    never downloaded.
    """
    try:
        response = client.get(url, allow_redirects=True, stream=True, timeout=timeout)
    except requests.Timeout:
        return Unreachable(f"timed out after {timeout:g}s")
    except requests.ConnectionError as exc:
        return Unreachable(f"connection failed: {exc}")
    except requests.RequestException as exc:
        return Unreachable(str(exc) or type(exc).__name__)

    try:
        code = response.status_code
        logger.debug(f"GET {url} -> {code}")
        if 200 <= code < 300:
            return Reachable()
        reason = response.reason or ""
        return Unreachable(f"{code} {reason}".strip())
    finally:
        response.close()


def verify_link(link: Link, client: Any, timeout: float = DEFAULT_TIMEOUT) -> LinkStatus:
    """Classify and, where applicable, fetch a link's target.

    Always sets ``link.status`` to a terminal value and returns it. Nothing
    raised while classifying or requesting escapes this function.

    Args:
        link: Link whose status is still empty
        client: Shared HTTP session (``requests.Session`` or compatible)
        timeout: Per-request timeout in seconds
    """
    try:
        target = normalize_target(link.target)
        status = classify_target(target)
        if status is None:
            status = _check_url(target, client, timeout)
    except ValueError as exc:
        status = Unreachable(f"malformed URL: {exc}")
    except Exception as exc:
        logger.exception(f"Unexpected error verifying {link}")
        status = Unreachable(f"unexpected error: {type(exc).__name__}: {exc}")

    link.status = status
    return status
