"""Walk a source tree, yielding the files whose links should be checked."""

import os
from collections.abc import Iterator
from pathlib import Path

from ...logging_config import get_logger
from ..ScanError import ScanError
from .IgnoreRules import IgnoreRules
from .matches_glob import matches_glob

logger = get_logger("walk")

DEFAULT_INCLUDE_GLOBS = ["*.rs", "*.md"]


def walk_files(root: Path, include_globs: list[str] | None = None) -> Iterator[Path]:
    """Yield regular files under ``root`` that match ``include_globs``.

    Hidden entries (leading ``.``) and anything excluded by a ``.gitignore``
    or ``.ignore`` file along the way are skipped. Symlinks are not
    followed. Entries are visited in sorted order. Unreadable
    subdirectories are logged and skipped.

    Raises:
        ScanError: If ``root`` does not exist or cannot be listed.
    """
    globs = DEFAULT_INCLUDE_GLOBS if include_globs is None else include_globs

    if root.is_file():
        if matches_glob(globs, root):
            yield root
        return
    if not root.is_dir():
        raise ScanError(f"Path does not exist or is not a directory: {root}", path=str(root))

    try:
        os.listdir(root)
    except OSError as exc:
        raise ScanError(f"Cannot read directory {root}: {exc}", path=str(root)) from exc

    yield from _walk_dir(root, IgnoreRules().child(root), globs)


def _walk_dir(directory: Path, rules: IgnoreRules, globs: list[str]) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.warning(f"Cannot read directory {directory}, skipping: {exc}")
        return

    for entry in entries:
        if entry.name.startswith("."):
            continue
        path = directory / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = entry.is_file(follow_symlinks=False)
        except OSError as exc:
            logger.warning(f"Cannot stat {path}, skipping: {exc}")
            continue

        if rules.is_ignored(path, is_dir):
            logger.debug(f"Ignored {path}")
            continue
        if is_dir:
            yield from _walk_dir(path, rules.child(path), globs)
        elif is_file and matches_glob(globs, path):
            yield path
