"""
URL Serialization
=================
Rebuilds URL strings from ParsedUrl components and query parameters.
"""

from urllib.parse import urlencode

from .models import ParsedUrl, QueryParameters


def build_query(params: QueryParameters) -> str:
    """
    Form-encode query parameters in their current order.

    Spaces become '+', reserved characters are percent-encoded and empty
    values render as ``key=``.
    """
    return urlencode(list(params.items()), errors="surrogateescape")


def serialize(parsed: ParsedUrl, params: QueryParameters) -> str:
    """
    Reassemble ``scheme://host[:port]path[?query][#fragment]``.

    Args:
        parsed: URL components
        params: Query parameters, serialized in iteration order

    Returns:
        URL string
    """
    url = f"{parsed.scheme}://{parsed.host}"
    if parsed.port is not None:
        url += f":{parsed.port}"
    url += parsed.path

    query = build_query(params)
    if query:
        url += f"?{query}"
    if parsed.fragment is not None:
        url += f"#{parsed.fragment}"
    return url
