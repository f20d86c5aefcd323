"""
Signer Models
=============
Signer configuration and verification outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import structlog

from ..exceptions import InvalidSignerKey, InvalidUrlParameter

logger = structlog.get_logger(__name__)

DEFAULT_SIGNATURE_PARAM = "signature"
DEFAULT_EXPIRE_PARAM = "url_expires_at"


@dataclass(frozen=True)
class SignerConfig:
    """Secret key and reserved parameter names for a signer."""
    key: bytes = field(repr=False)
    signature_param: str = DEFAULT_SIGNATURE_PARAM
    expire_param: str = DEFAULT_EXPIRE_PARAM

    def __post_init__(self):
        if not self.key:
            logger.warning("signer_config_rejected", reason="empty_key")
            raise InvalidSignerKey()
        if not self.signature_param:
            logger.warning("signer_config_rejected", reason="empty_signature_param")
            raise InvalidUrlParameter("invalid url signature parameter")
        if not self.expire_param:
            logger.warning("signer_config_rejected", reason="empty_expire_param")
            raise InvalidUrlParameter("invalid url expire parameter")
        if self.signature_param == self.expire_param:
            logger.warning(
                "signer_config_rejected",
                reason="same_params",
                param=self.signature_param,
            )
            raise InvalidUrlParameter("url parameters must differ")

    @classmethod
    def create(
        cls,
        key: Union[str, bytes],
        signature_param: str = DEFAULT_SIGNATURE_PARAM,
        expire_param: str = DEFAULT_EXPIRE_PARAM,
    ) -> "SignerConfig":
        """Build a config from a text or bytes key."""
        if isinstance(key, str):
            key = key.encode()
        return cls(key=key, signature_param=signature_param, expire_param=expire_param)


class VerificationStatus(str, Enum):
    """Outcome of checking a signed URL."""
    VALID = "valid"
    MISSING_PARAMETERS = "missing_parameters"
    MALFORMED_EXPIRY = "malformed_expiry"
    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"


@dataclass
class VerificationResult:
    """Result of a signed URL check."""
    status: VerificationStatus
    expires_at: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return self.status is VerificationStatus.VALID

    def __bool__(self) -> bool:
        return self.is_valid
