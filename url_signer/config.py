"""
URL Signer Configuration
========================
Environment-driven settings and a shared signer instance.

Environment variables:
    URL_SIGNER_KEY              Secret signer key (required)
    URL_SIGNER_SIGNATURE_PARAM  Signature parameter name (default: signature)
    URL_SIGNER_EXPIRE_PARAM     Expiry parameter name (default: url_expires_at)
    URL_SIGNER_ALGORITHM        sha256 or sha512 (default: sha256)
    URL_SIGNER_DEFAULT_TTL      Default lifetime in seconds (default: 3600)
"""

import os
from dataclasses import dataclass, field
from typing import Optional

import structlog

from .clock import Clock
from .signing import (
    DEFAULT_ALGORITHM,
    DEFAULT_EXPIRE_PARAM,
    DEFAULT_SIGNATURE_PARAM,
    UrlSigner,
    get_algorithm,
)

logger = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 3600


@dataclass
class SignerSettings:
    """Settings for building a UrlSigner."""
    key: str = field(default="", repr=False)
    signature_param: str = DEFAULT_SIGNATURE_PARAM
    expire_param: str = DEFAULT_EXPIRE_PARAM
    algorithm: str = DEFAULT_ALGORITHM
    default_ttl: int = DEFAULT_TTL_SECONDS

    @classmethod
    def from_env(cls) -> "SignerSettings":
        """Read settings from the current environment."""
        return cls(
            key=os.environ.get("URL_SIGNER_KEY", ""),
            signature_param=os.environ.get(
                "URL_SIGNER_SIGNATURE_PARAM", DEFAULT_SIGNATURE_PARAM
            ),
            expire_param=os.environ.get(
                "URL_SIGNER_EXPIRE_PARAM", DEFAULT_EXPIRE_PARAM
            ),
            algorithm=os.environ.get("URL_SIGNER_ALGORITHM", DEFAULT_ALGORITHM),
            default_ttl=int(
                os.environ.get("URL_SIGNER_DEFAULT_TTL", str(DEFAULT_TTL_SECONDS))
            ),
        )


def create_signer(
    settings: Optional[SignerSettings] = None,
    clock: Optional[Clock] = None,
) -> UrlSigner:
    """
    Build a signer from settings.

    Args:
        settings: Signer settings (read from the environment if omitted)
        clock: Optional clock override

    Returns:
        Configured UrlSigner

    Raises:
        InvalidSignerKey: If no key is configured
        InvalidUrlParameter: If parameter names are empty or identical
        UnsupportedAlgorithm: If the algorithm name is unknown
    """
    settings = settings or SignerSettings.from_env()
    signer = UrlSigner(
        settings.key,
        settings.signature_param,
        settings.expire_param,
        clock=clock,
        algorithm=get_algorithm(settings.algorithm),
        default_ttl=settings.default_ttl,
    )
    logger.info(
        "url_signer_created",
        algorithm=settings.algorithm,
        signature_param=settings.signature_param,
        expire_param=settings.expire_param,
        default_ttl=settings.default_ttl,
    )
    return signer


# Singleton instance
_url_signer: Optional[UrlSigner] = None


def get_url_signer() -> UrlSigner:
    """Get or create the process-wide signer built from the environment."""
    global _url_signer
    if _url_signer is None:
        _url_signer = create_signer()
    return _url_signer


def reset_url_signer() -> None:
    """Drop the cached signer so the next call re-reads the environment."""
    global _url_signer
    _url_signer = None
