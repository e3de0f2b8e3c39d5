"""Classification policy: which link targets get a network check."""

from urllib.parse import urlsplit

from .LinkStatus import LinkStatus, Questionable, Unreachable

NETWORK_SCHEMES = frozenset({"http", "https"})
NO_CHECK = "no network check performed"


def classify_target(target: str) -> LinkStatus | None:
    """Return a terminal status for targets that are not fetched.

    Returns ``None`` when the (normalized) target is an ``http``/``https``
    URL with a host, meaning the verifier must issue a request.

    Raises:
        ValueError: If the target looks like a URL but cannot be parsed.
    """
    if not target:
        return Unreachable("empty link target")
    if target.startswith("#"):
        return Questionable(f"local anchor, {NO_CHECK}")
    if target.startswith("//"):
        return Questionable(f"protocol-relative URL, {NO_CHECK}")
    # Rust intra-doc links: [Vec](std::vec::Vec)
    if "::" in target and "://" not in target:
        return Questionable(f"intra-doc path, {NO_CHECK}")

    parts = urlsplit(target)
    scheme = parts.scheme.lower()

    # "C:/docs/x.md" parses with a one-letter scheme
    if len(scheme) <= 1:
        return Questionable(f"local path, {NO_CHECK}")
    if scheme in NETWORK_SCHEMES:
        if not parts.hostname:
            return Unreachable("malformed URL: missing host")
        _ = parts.port  # raises ValueError when out of range
        return None
    if scheme == "mailto":
        return Questionable(f"mail address, {NO_CHECK}")
    return Questionable(f"unsupported scheme '{scheme}', {NO_CHECK}")
