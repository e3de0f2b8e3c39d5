"""Markdown inline link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser
from .LinkRef import LinkRef

# [label](target): label without brackets, target without parentheses
MARKDOWN_LINK_PATTERN = re.compile(r"\[[^\[\]]+\]\(([^\(\)]+)\)")


class MarkdownParser(BaseParser):
    """Parser for ``[label](target)`` links in Markdown and Rust doc comments.

    The target is captured exactly as written; no trimming is applied.
    """

    def parse_line(self, line: str, line_number: int) -> Iterator[LinkRef]:
        for match in MARKDOWN_LINK_PATTERN.finditer(line):
            yield LinkRef(line_number=line_number, raw_target=match.group(1))
