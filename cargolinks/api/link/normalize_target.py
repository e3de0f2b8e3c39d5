"""Reduce a raw Markdown link destination to the part worth checking."""

import re

# [label](url "title") or [label](url 'title')
_TITLE_PATTERN = re.compile(r"""\s+(?:"[^"]*"|'[^']*')\s*$""")


def normalize_target(raw_target: str) -> str:
    """Strip surrounding whitespace, ``<...>`` brackets and a trailing title.

    The raw capture on the Link is never modified; this only produces the
    string the verifier classifies and requests.
    """
    target = _TITLE_PATTERN.sub("", raw_target.strip())
    if target.startswith("<") and target.endswith(">"):
        target = target[1:-1].strip()
    return target
