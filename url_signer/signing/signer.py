"""
URL Signer
==========
Signs URLs with an expiry timestamp and keyed signature, and verifies them.
"""

import hmac
from datetime import timedelta
from typing import Optional, Union

import structlog

from ..canonical import ParsedUrl, serialize, split_url
from ..clock import Clock, SystemClock, Timestamp, to_unix_seconds
from ..exceptions import InvalidExpiration, ReservedParameterError
from .algorithms import HmacSha256Signature, SignatureAlgorithm
from .models import (
    DEFAULT_EXPIRE_PARAM,
    DEFAULT_SIGNATURE_PARAM,
    SignerConfig,
    VerificationResult,
    VerificationStatus,
)

logger = structlog.get_logger(__name__)


class UrlSigner:
    """
    Creates and checks expiring signed URLs.

    ``sign`` adds an expiry parameter, sorts the query by name and appends
    a signature computed over the resulting URL. ``verify`` strips the
    signature parameter and recomputes it over the URL as received, so
    reordering the query of a signed URL invalidates it.

    Instances hold no per-call state and can be shared between threads.

    Usage:
        signer = UrlSigner("secret")
        url = signer.sign("https://example.com/file.pdf", expires_at)
        signer.verify(url)  # True until expires_at has passed
    """

    def __init__(
        self,
        signer_key: Union[str, bytes],
        signature_param: str = DEFAULT_SIGNATURE_PARAM,
        expire_param: str = DEFAULT_EXPIRE_PARAM,
        clock: Optional[Clock] = None,
        algorithm: Optional[SignatureAlgorithm] = None,
        default_ttl: Optional[Union[int, timedelta]] = None,
    ):
        self.config = SignerConfig.create(signer_key, signature_param, expire_param)
        self.clock = clock or SystemClock()
        self.algorithm = algorithm or HmacSha256Signature()
        self.default_ttl = default_ttl

    @classmethod
    def from_config(
        cls,
        config: SignerConfig,
        clock: Optional[Clock] = None,
        algorithm: Optional[SignatureAlgorithm] = None,
        default_ttl: Optional[Union[int, timedelta]] = None,
    ) -> "UrlSigner":
        return cls(
            config.key,
            config.signature_param,
            config.expire_param,
            clock=clock,
            algorithm=algorithm,
            default_ttl=default_ttl,
        )

    @property
    def signature_param(self) -> str:
        return self.config.signature_param

    @property
    def expire_param(self) -> str:
        return self.config.expire_param

    def sign(self, url: str, expiration: Timestamp) -> str:
        """
        Sign a URL so that it is valid until ``expiration``.

        Args:
            url: Absolute URL without the reserved parameters
            expiration: Epoch seconds or datetime (inclusive)

        Returns:
            URL with sorted query, expiry and trailing signature parameter

        Raises:
            InvalidUrl: If the URL cannot be parsed
            ReservedParameterError: If the URL already has a reserved parameter
            InvalidExpiration: If expiration is not a supported timestamp
        """
        parsed, params = split_url(url)

        for name in (self.signature_param, self.expire_param):
            if name in params:
                logger.warning("url_sign_rejected", reason="reserved_parameter", param=name)
                raise ReservedParameterError(name)

        expires_at = to_unix_seconds(expiration)
        params.set(self.expire_param, expires_at)
        params = params.sorted_by_key()

        signature = self._compute(serialize(parsed, params))
        params.set(self.signature_param, signature)

        logger.debug("url_signed", host=parsed.host, path=parsed.path, expires_at=expires_at)
        return serialize(parsed, params)

    def sign_for(self, url: str, ttl: Optional[Union[int, timedelta]] = None) -> str:
        """
        Sign a URL valid for ``ttl`` from the clock's current time.

        Args:
            url: Absolute URL
            ttl: Lifetime in seconds or as a timedelta (default: the
                signer's default_ttl)

        Returns:
            Signed URL

        Raises:
            InvalidExpiration: If no ttl is given and no default is set, or
                the ttl is negative
        """
        if ttl is None:
            ttl = self.default_ttl
        if ttl is None:
            raise InvalidExpiration("no ttl given and no default_ttl configured")
        if isinstance(ttl, timedelta):
            ttl = int(ttl.total_seconds())
        if isinstance(ttl, bool) or not isinstance(ttl, int):
            raise InvalidExpiration(f"unsupported ttl {ttl!r}")
        if ttl < 0:
            raise InvalidExpiration("ttl must not be negative")
        return self.sign(url, self._now() + ttl)

    def verify(self, url: str) -> bool:
        """
        Check a signed URL.

        Missing parameters, expiry and signature mismatch return False.

        Raises:
            InvalidUrl: If the URL cannot be parsed
        """
        return self.check(url).is_valid

    def check(self, url: str) -> VerificationResult:
        """
        Check a signed URL and report why it was rejected.

        A URL whose expiry equals the current second is still valid.

        Args:
            url: Signed URL

        Returns:
            VerificationResult with status and parsed expiry

        Raises:
            InvalidUrl: If the URL cannot be parsed
        """
        parsed, params = split_url(url)

        if self.signature_param not in params or self.expire_param not in params:
            return self._reject(parsed, VerificationStatus.MISSING_PARAMETERS)

        try:
            expires_at = int(params.get(self.expire_param))
        except ValueError:
            return self._reject(parsed, VerificationStatus.MALFORMED_EXPIRY)

        if expires_at < self._now():
            return self._reject(parsed, VerificationStatus.EXPIRED, expires_at)

        provided = params.pop(self.signature_param)
        expected = self._compute(serialize(parsed, params))

        provided_bytes = provided.encode(errors="surrogateescape")
        if not hmac.compare_digest(expected.encode(), provided_bytes):
            return self._reject(parsed, VerificationStatus.INVALID_SIGNATURE, expires_at)

        return VerificationResult(VerificationStatus.VALID, expires_at)

    def _compute(self, message: str) -> str:
        return self.algorithm.compute(self.config.key, message)

    def _now(self) -> int:
        now = self.clock.now()
        # clocks built on time.time() return floats
        if isinstance(now, float):
            return int(now)
        return to_unix_seconds(now)

    def _reject(
        self,
        parsed: ParsedUrl,
        status: VerificationStatus,
        expires_at: Optional[int] = None,
    ) -> VerificationResult:
        logger.info(
            "signed_url_rejected",
            status=status.value,
            host=parsed.host,
            path=parsed.path,
        )
        return VerificationResult(status, expires_at)

    def __repr__(self) -> str:
        return (
            f"UrlSigner(signature_param={self.signature_param!r}, "
            f"expire_param={self.expire_param!r}, algorithm={self.algorithm!r})"
        )
