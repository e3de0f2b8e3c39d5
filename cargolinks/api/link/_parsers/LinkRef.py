"""Link reference dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRef:
    """A link target found on one line of a file."""

    line_number: int
    raw_target: str
