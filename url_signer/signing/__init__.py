"""
URL Signing
===========
Expiring, tamper-evident signed URLs.
"""

from .algorithms import (
    SignatureAlgorithm,
    HmacSignature,
    HmacSha256Signature,
    HmacSha512Signature,
    get_algorithm,
    ALGORITHMS,
    DEFAULT_ALGORITHM,
)
from .models import (
    SignerConfig,
    VerificationStatus,
    VerificationResult,
    DEFAULT_SIGNATURE_PARAM,
    DEFAULT_EXPIRE_PARAM,
)
from .signer import UrlSigner

__all__ = [
    # Algorithms
    "SignatureAlgorithm",
    "HmacSignature",
    "HmacSha256Signature",
    "HmacSha512Signature",
    "get_algorithm",
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    # Models
    "SignerConfig",
    "VerificationStatus",
    "VerificationResult",
    "DEFAULT_SIGNATURE_PARAM",
    "DEFAULT_EXPIRE_PARAM",
    # Signer
    "UrlSigner",
]
