"""
URL Canonicalization
====================
Deterministic parsing and serialization of URLs for signing.
"""

from .models import ParsedUrl, QueryParameters
from .parser import parse_url, parse_query, split_url
from .serializer import build_query, serialize

__all__ = [
    # Models
    "ParsedUrl",
    "QueryParameters",
    # Parsing
    "parse_url",
    "parse_query",
    "split_url",
    # Serialization
    "build_query",
    "serialize",
]
