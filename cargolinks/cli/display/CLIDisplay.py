"""CLI display implementation using Rich library."""

from typing import TextIO

from rich.console import Console
from rich.markup import escape

from .Display import Display


class CLIDisplay(Display):
    """Leveled, optionally colored terminal output.

    Link results go to stdout; debug lines and problems with the run
    itself go to stderr. ``verbose`` is the number of ``-v`` flags; debug
    lines need at least one.
    """

    def __init__(
        self,
        verbose: int = 0,
        color: bool = True,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.verbose = verbose
        self.color = color
        color_system = "auto" if color else None
        # file=None lets Rich look up sys.stdout / sys.stderr at write time
        self.console = Console(file=stdout, color_system=color_system, highlight=False, soft_wrap=True)
        self.stderr_console = Console(
            file=stderr, stderr=stderr is None, color_system=color_system, highlight=False, soft_wrap=True
        )

    def debug(self, message: str, **kwargs) -> None:  # noqa: ARG002
        if self.verbose >= 1:
            self.stderr_console.print(f"[dim]{escape(message)}[/dim]")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(escape(message))

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(f"[green]{escape(message)}[/green]")

    def warning(self, message: str, **kwargs) -> None:
        console = self.stderr_console if kwargs.get("err") else self.console
        console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str, **kwargs) -> None:
        console = self.stderr_console if kwargs.get("err") else self.console
        console.print(f"[red]{escape(message)}[/red]")
