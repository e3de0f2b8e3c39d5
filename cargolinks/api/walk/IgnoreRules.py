"""Layered ignore-file rules (.gitignore / .ignore) for a directory tree."""

from pathlib import Path

from ...logging_config import get_logger
from ._IgnoreRule import _IgnoreRule

logger = get_logger("walk.ignore")

IGNORE_FILENAMES = (".gitignore", ".ignore")


class IgnoreRules:
    """Ignore rules collected from the directories of one walk.

    Rules from deeper directories take precedence over shallower ones, and
    within one directory later lines take precedence over earlier ones, so
    a ``!pattern`` can re-include what a previous line excluded.
    """

    def __init__(self) -> None:
        self._layers: list[tuple[Path, list[_IgnoreRule]]] = []

    def child(self, directory: Path) -> "IgnoreRules":
        """Return rules for ``directory``: these plus its own ignore files."""
        rules: list[_IgnoreRule] = []
        for filename in IGNORE_FILENAMES:
            ignore_file = directory / filename
            if not ignore_file.is_file():
                continue
            try:
                text = ignore_file.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                logger.warning(f"Cannot read {ignore_file}, skipping: {exc}")
                continue
            for line in text.splitlines():
                rule = _IgnoreRule.from_line(line)
                if rule is not None:
                    rules.append(rule)

        nested = IgnoreRules()
        nested._layers = list(self._layers)
        if rules:
            logger.debug(f"Loaded {len(rules)} ignore rules from {directory}")
            nested._layers.append((directory, rules))
        return nested

    def is_ignored(self, path: Path, is_dir: bool) -> bool:
        for base, rules in reversed(self._layers):
            try:
                rel_path = path.relative_to(base).as_posix()
            except ValueError:
                continue
            for rule in reversed(rules):
                if rule.matches(rel_path, is_dir):
                    return not rule.negated
        return False
