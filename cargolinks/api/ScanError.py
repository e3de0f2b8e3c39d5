"""Error raised when the source tree cannot be scanned."""


class ScanError(Exception):
    """A file or directory needed for the scan could not be read."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
