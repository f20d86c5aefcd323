"""
Signature Algorithms
====================
Keyed-hash strategies used to sign canonical URL strings.
"""

import hmac
import hashlib
from typing import Callable, Dict, Protocol, runtime_checkable

from ..exceptions import UnsupportedAlgorithm

DEFAULT_ALGORITHM = "sha256"


@runtime_checkable
class SignatureAlgorithm(Protocol):
    """Anything with ``compute(key, message)`` returning a hex digest."""

    def compute(self, key: bytes, message: str) -> str:
        ...


class HmacSignature:
    """HMAC over the UTF-8 encoded message, hex-encoded."""

    def __init__(self, digestmod, name: str):
        self.digestmod = digestmod
        self.name = name

    def compute(self, key: bytes, message: str) -> str:
        """
        Compute a hex-encoded HMAC signature.

        Args:
            key: Secret signer key
            message: Canonical URL string

        Returns:
            Hex digest
        """
        return hmac.new(key, message.encode(), self.digestmod).hexdigest()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class HmacSha256Signature(HmacSignature):
    """HMAC-SHA256, the default algorithm."""

    def __init__(self):
        super().__init__(hashlib.sha256, "sha256")


class HmacSha512Signature(HmacSignature):
    """HMAC-SHA512."""

    def __init__(self):
        super().__init__(hashlib.sha512, "sha512")


ALGORITHMS: Dict[str, Callable[[], HmacSignature]] = {
    "sha256": HmacSha256Signature,
    "sha512": HmacSha512Signature,
}


def get_algorithm(name: str = DEFAULT_ALGORITHM) -> HmacSignature:
    """
    Look up a signature algorithm by name.

    Args:
        name: Algorithm name ("sha256" or "sha512"), case-insensitive

    Returns:
        Algorithm instance

    Raises:
        UnsupportedAlgorithm: If the name is not registered
    """
    try:
        return ALGORITHMS[name.lower()]()
    except KeyError:
        raise UnsupportedAlgorithm(
            f"unsupported signature algorithm {name!r}, "
            f"expected one of {sorted(ALGORITHMS)}"
        ) from None
