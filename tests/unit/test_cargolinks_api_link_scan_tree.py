"""Unit tests for cargolinks.api.link.scan_tree."""

import importlib
import os
import queue
from pathlib import Path

import pytest

from cargolinks.api.link.Dispatcher import Dispatcher
from cargolinks.api.link.scan_tree import scan_tree
from cargolinks.api.ScanError import ScanError


def _drain(results: queue.Queue, n: int) -> list:
    return [results.get(timeout=5) for _ in range(n)]


def test_every_match_becomes_one_submitted_link(write_tree, fake_session, display):
    root = write_tree(
        {
            "README.md": "# Title\n[a](#one) text [b](#two)\n\nplain line\n",
            "src/lib.rs": "//! See [docs](#three).\nfn main() {}\n",
        }
    )
    files = [root / "README.md", root / "src" / "lib.rs"]
    results: queue.Queue = queue.Queue()

    with Dispatcher(2) as dispatcher:
        n_links = scan_tree(files, dispatcher, fake_session({}), results, display, timeout=1)
        assert dispatcher.submitted == n_links

    assert n_links == 3
    links = _drain(results, n_links)
    assert results.empty()
    found = sorted((Path(link.source_path).name, link.line_number, link.target) for link in links)
    assert found == [("README.md", 2, "#one"), ("README.md", 2, "#two"), ("lib.rs", 1, "#three")]
    assert all(link.is_verified for link in links)


def test_source_path_is_rendered_as_text(write_tree, fake_session, display):
    root = write_tree({"docs/guide.md": "[x](#y)\n"})
    results: queue.Queue = queue.Queue()

    with Dispatcher(1) as dispatcher:
        scan_tree([root / "docs" / "guide.md"], dispatcher, fake_session({}), results, display, timeout=1)

    (link,) = _drain(results, 1)
    assert link.source_path == str(root / "docs" / "guide.md")


def test_no_links_submits_nothing(write_tree, fake_session, display):
    root = write_tree({"README.md": "nothing to see\n"})
    with Dispatcher(1) as dispatcher:
        n_links = scan_tree([root / "README.md"], dispatcher, fake_session({}), queue.Queue(), display, timeout=1)
    assert n_links == 0
    assert dispatcher.submitted == 0


def test_non_utf8_file_name_is_skipped_with_warning(tmp_path, fake_session, display, monkeypatch):
    scan_tree_module = importlib.import_module("cargolinks.api.link.scan_tree")

    good = tmp_path / "good.md"
    good.write_text("[a](#b)\n", encoding="utf-8")
    bad = tmp_path / "bad.md"
    monkeypatch.setattr(scan_tree_module, "path_text", lambda p: None if p == bad else str(p))

    results: queue.Queue = queue.Queue()
    with Dispatcher(1) as dispatcher:
        n_links = scan_tree([bad, good], dispatcher, fake_session({}), results, display, timeout=1)

    assert n_links == 1
    (warning,) = display.messages("warning")
    assert warning == f"Filename is not valid unicode, skipping: {bad}"


def test_undecodable_file_is_fatal(tmp_path, fake_session, display):
    bad = tmp_path / "binary.md"
    bad.write_bytes(b"[a](#b)\n\xff\xfe\n")
    with Dispatcher(1) as dispatcher, pytest.raises(ScanError, match="not valid UTF-8") as excinfo:
        scan_tree([bad], dispatcher, fake_session({}), queue.Queue(), display, timeout=1)
    assert excinfo.value.path == str(bad)


def test_missing_file_is_fatal(tmp_path, fake_session, display):
    with Dispatcher(1) as dispatcher, pytest.raises(ScanError, match="Cannot read"):
        scan_tree([tmp_path / "gone.md"], dispatcher, fake_session({}), queue.Queue(), display, timeout=1)


def test_lone_carriage_return_does_not_end_a_line(tmp_path, fake_session, display):
    notes = tmp_path / "notes.md"
    notes.write_bytes(b"first\rsecond [x](#y)\r\nthird [z](#w)\n")
    results: queue.Queue = queue.Queue()

    with Dispatcher(1) as dispatcher:
        n_links = scan_tree([notes], dispatcher, fake_session({}), results, display, timeout=1)

    found = sorted((link.line_number, link.target) for link in _drain(results, n_links))
    assert found == [(1, "#y"), (2, "#w")]


def test_undecodable_file_name_is_shown_with_replacement_characters(tmp_path, fake_session, display):
    odd = Path(os.fsdecode(b"bad\xff.md"))

    with Dispatcher(1) as dispatcher:
        n_links = scan_tree([odd], dispatcher, fake_session({}), queue.Queue(), display, timeout=1)

    assert n_links == 0
    assert display.messages("warning") == ["Filename is not valid unicode, skipping: bad\ufffd.md"]
