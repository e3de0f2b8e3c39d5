"""Abstract base parser for link extraction."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .LinkRef import LinkRef


class BaseParser(ABC):
    """Abstract interface for line-oriented link parsers."""

    @abstractmethod
    def parse_line(self, line: str, line_number: int) -> Iterator[LinkRef]:
        """Yield every link found on a single line."""
        pass
