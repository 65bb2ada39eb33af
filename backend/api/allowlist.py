"""ArcGIS host allow-list: the only gate on caller-supplied layer URLs."""
from __future__ import annotations
import re
from typing import AbstractSet
from urllib.parse import urlsplit

from urllib3.util import parse_url

# backslash, whitespace, control chars: parsers disagree on where the host ends
_AMBIGUOUS = re.compile(r"[\\\s\x00-\x1f\x7f]")


def is_allowed(url: object, allowed_hosts: AbstractSet[str]) -> bool:
    """
    True when *url* parses and its hostname is exactly one of
    *allowed_hosts*. Scheme and port are ignored; no subdomain matching.
    Never raises.

    The host is read with urllib3, the parser `requests` sends with, and
    must agree with `urlsplit`; any disagreement is a rejection.
    """
    if not isinstance(url, str) or _AMBIGUOUS.search(url):
        return False
    try:
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            return False
        host = parse_url(url).host
    except ValueError:          # e.g. "http://[::1", urllib3 LocationParseError
        return False
    if not host:
        return False
    host = host.lower()
    return host == parts.hostname and host in allowed_hosts
