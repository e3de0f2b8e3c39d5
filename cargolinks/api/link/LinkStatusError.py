"""Error raised when a link status is assigned twice."""


class LinkStatusError(Exception):
    """A link's verification status was already set."""
