"""Link entity: where a reference was found and what became of it."""

from dataclasses import dataclass, field

from .LinkStatus import LinkStatus
from .LinkStatusError import LinkStatusError


@dataclass(eq=False)
class Link:
    """A single reference discovered in a source file.

    ``source_path``, ``line_number`` and ``target`` are fixed at construction.
    ``status`` starts empty and may be set exactly once, by the job that owns
    the link while it is being verified.
    """

    source_path: str
    line_number: int
    target: str
    _status: LinkStatus | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"line_number must be 1-based, got {self.line_number}")

    def __setattr__(self, name: str, value) -> None:
        if name in ("source_path", "line_number", "target") and name in self.__dict__:
            raise AttributeError(f"Link.{name} is read-only")
        object.__setattr__(self, name, value)

    @property
    def status(self) -> LinkStatus | None:
        return self._status

    @status.setter
    def status(self, value: LinkStatus) -> None:
        if value is None:
            raise LinkStatusError(f"Cannot clear status of {self}")
        if self._status is not None:
            raise LinkStatusError(f"Status of {self} already set to {self._status!r}")
        self._status = value

    @property
    def is_verified(self) -> bool:
        return self._status is not None

    def __str__(self) -> str:
        return f"{self.source_path}:{self.line_number} {self.target}"
