"""Construct the HTTP session shared by every verification job."""

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore

from ..config.get_package_version import get_package_version


def build_http_client(concurrency: int, user_agent: str | None = None) -> requests.Session:
    """Create one connection-reusing session for the whole run.

    The connection pool is sized to the worker count so that concurrent
    jobs hitting the same host do not discard connections. Jobs only call
    ``get`` on the session and never change its headers, cookies or
    adapters, so it is shared read-only.
    """
    session = requests.Session()
    session.headers["User-Agent"] = user_agent or f"cargo-links/{get_package_version()}"
    adapter = HTTPAdapter(pool_connections=concurrency, pool_maxsize=concurrency, max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
