"""Run totals for a link check."""

from dataclasses import dataclass


@dataclass
class CheckResult:
    """Counts of links by outcome after all results were drained."""

    n_links: int = 0
    n_reachable: int = 0
    n_questionable: int = 0
    n_bad_links: int = 0

    @property
    def success(self) -> bool:
        return self.n_bad_links == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1
