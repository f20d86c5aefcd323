"""
URL Parsing
===========
Decomposes absolute URLs into ParsedUrl components and query parameters.
"""

from typing import Tuple
from urllib.parse import parse_qsl, urlsplit

from ..exceptions import InvalidUrl
from .models import ParsedUrl, QueryParameters


def parse_url(url: str) -> ParsedUrl:
    """
    Parse an absolute URL.

    User info (``user:pass@``) is not carried over. The host keeps the case it
    was written with.

    Args:
        url: Absolute URL, e.g. https://example.com:8080/path?q=1#top

    Returns:
        ParsedUrl with scheme, host, port, path and fragment

    Raises:
        InvalidUrl: If the scheme or host is missing or the port is invalid
    """
    return split_url(url)[0]


def split_url(url: str) -> Tuple[ParsedUrl, QueryParameters]:
    """Parse an absolute URL and its query string in one pass."""
    if not isinstance(url, str):
        raise InvalidUrl(url, "expected a string")

    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise InvalidUrl(url, str(e)) from e

    if not parts.scheme:
        raise InvalidUrl(url, "missing scheme")
    if not parts.hostname:
        raise InvalidUrl(url, "missing host")

    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[:host.index("]") + 1]
    else:
        host = host.partition(":")[0]

    parsed = ParsedUrl(
        scheme=parts.scheme,
        host=host,
        port=port,
        path=parts.path,
        fragment=parts.fragment or None,
    )
    return parsed, parse_query(parts.query)


def parse_query(query: str) -> QueryParameters:
    """
    Parse a query string, keeping the order parameters appear in.

    ``a`` and ``a=`` both give an empty value. When a name repeats, the last
    value is kept. Escapes that are not valid UTF-8 survive a round trip
    through build_query unchanged.

    Args:
        query: Raw query string without the leading '?'

    Returns:
        QueryParameters in order of first appearance
    """
    return QueryParameters(
        parse_qsl(query, keep_blank_values=True, errors="surrogateescape")
    )
