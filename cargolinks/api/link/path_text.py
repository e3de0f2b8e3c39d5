"""Render a filesystem path as text."""

import os
from pathlib import Path


def path_text(path: Path) -> str | None:
    """Return ``path`` as a UTF-8 representable string, or None if it is not."""
    text = os.fsdecode(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return text
