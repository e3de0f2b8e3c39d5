"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod


class Display(ABC):
    """Leveled output sink for user-facing messages."""

    @abstractmethod
    def debug(self, message: str, **kwargs) -> None:
        """Display a debug message (only shown at higher verbosity)."""
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""
        pass

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., err=True for stderr)
        """
        pass
