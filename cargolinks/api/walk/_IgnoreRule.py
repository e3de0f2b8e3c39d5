"""A single compiled line from an ignore file."""

import re
from dataclasses import dataclass

from ._translate_pattern import _translate_pattern


@dataclass(frozen=True)
class _IgnoreRule:
    regex: re.Pattern
    negated: bool
    dir_only: bool
    anchored: bool

    @classmethod
    def from_line(cls, line: str) -> "_IgnoreRule | None":
        """Compile a line, or return None for blanks and comments."""
        line = line.rstrip("\n").rstrip("\r")
        if not line.endswith("\\ "):
            line = line.rstrip(" ")
        if not line or line.startswith("#"):
            return None

        negated = line.startswith("!")
        if negated:
            line = line[1:]
        elif line.startswith("\\!") or line.startswith("\\#"):
            line = line[1:]

        dir_only = line.endswith("/")
        line = line.rstrip("/")
        if not line:
            return None

        # A slash anywhere but the end ties the pattern to the ignore file's directory
        anchored = "/" in line
        line = line.lstrip("/")
        return cls(re.compile(_translate_pattern(line)), negated, dir_only, anchored)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        """Match a POSIX path relative to the ignore file's directory."""
        if self.dir_only and not is_dir:
            return False
        if self.anchored:
            return self.regex.fullmatch(rel_path) is not None
        return self.regex.fullmatch(rel_path.rsplit("/", 1)[-1]) is not None
