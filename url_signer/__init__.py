"""
URL Signer
==========
Expiring, tamper-evident signed URLs.

Usage:
    from url_signer import UrlSigner

    signer = UrlSigner("secret")
    url = signer.sign("https://example.com/report.pdf", 1600000000)
    signer.verify(url)
"""

__version__ = "0.1.0"

# Exceptions
from url_signer.exceptions import (
    UrlSignerError,
    InvalidSignerKey,
    InvalidUrlParameter,
    InvalidUrl,
    ReservedParameterError,
    InvalidExpiration,
    UnsupportedAlgorithm,
)

# Clock
from url_signer.clock import Clock, SystemClock, FixedClock, to_unix_seconds

# Canonicalization
from url_signer.canonical import (
    ParsedUrl,
    QueryParameters,
    parse_url,
    parse_query,
    split_url,
    build_query,
    serialize,
)

# Signing
from url_signer.signing import (
    UrlSigner,
    SignerConfig,
    VerificationStatus,
    VerificationResult,
    SignatureAlgorithm,
    HmacSignature,
    HmacSha256Signature,
    HmacSha512Signature,
    get_algorithm,
)

# Config
from url_signer.config import (
    SignerSettings,
    create_signer,
    get_url_signer,
    reset_url_signer,
)

__all__ = [
    # Exceptions
    "UrlSignerError",
    "InvalidSignerKey",
    "InvalidUrlParameter",
    "InvalidUrl",
    "ReservedParameterError",
    "InvalidExpiration",
    "UnsupportedAlgorithm",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    "to_unix_seconds",
    # Canonicalization
    "ParsedUrl",
    "QueryParameters",
    "parse_url",
    "parse_query",
    "split_url",
    "build_query",
    "serialize",
    # Signing
    "UrlSigner",
    "SignerConfig",
    "VerificationStatus",
    "VerificationResult",
    "SignatureAlgorithm",
    "HmacSignature",
    "HmacSha256Signature",
    "HmacSha512Signature",
    "get_algorithm",
    # Config
    "SignerSettings",
    "create_signer",
    "get_url_signer",
    "reset_url_signer",
]
