"""Terminal verification outcomes for a link."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Reachable:
    """The target responded successfully."""


@dataclass(frozen=True)
class Questionable:
    """The target could not be conclusively checked, but is not fatal."""

    reason: str


@dataclass(frozen=True)
class Unreachable:
    """The target is broken or the check failed."""

    reason: str | None = None


LinkStatus = Reachable | Questionable | Unreachable
