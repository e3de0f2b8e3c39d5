"""Shared pytest configuration and fixtures for all tests."""

import threading
import time

import pytest
import requests


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# HTTP fakes
# =============================================================================


class FakeResponse:
    """Just enough of ``requests.Response`` for the verifier."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.closed = False

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Stand-in for ``requests.Session`` that never touches the network.

    ``routes`` maps a URL to a status code, a ``(code, reason)`` tuple, or an
    exception instance to raise. Unknown URLs get a ConnectionError, like a
    host that does not resolve. The session records every call and the
    highest number of calls that were in flight at the same time.
    """

    def __init__(self, routes: dict | None = None, delay: float = 0.0):
        self.routes = dict(routes or {})
        self.delay = delay
        self.calls: list[tuple[str, dict]] = []
        self.responses: list[FakeResponse] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False
        self._lock = threading.Lock()

    def get(self, url: str, **kwargs):
        with self._lock:
            self.calls.append((url, kwargs))
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                time.sleep(self.delay)
            route = self.routes.get(url)
            if route is None:
                raise requests.ConnectionError(f"Failed to resolve host for {url}")
            if isinstance(route, BaseException):
                raise route
            code, reason = route if isinstance(route, tuple) else (route, "")
            response = FakeResponse(code, reason)
            with self._lock:
                self.responses.append(response)
            return response
        finally:
            with self._lock:
                self.in_flight -= 1

    def close(self) -> None:
        self.closed = True


class RecordingDisplay:
    """Display that keeps ``(level, message)`` pairs instead of printing."""

    def __init__(self):
        self.lines: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def _record(self, level: str, message: str) -> None:
        with self._lock:
            self.lines.append((level, message))

    def debug(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._record("debug", message)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._record("info", message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._record("success", message)

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._record("warning", message)

    def error(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._record("error", message)

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message in self.lines if lvl == level]


@pytest.fixture
def fake_session():
    """Factory for FakeSession instances."""
    return FakeSession


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def write_tree(tmp_path):
    """Create files under tmp_path from a ``{relative_path: text}`` mapping."""

    def _write(files: dict[str, str]):
        for rel, text in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _write
