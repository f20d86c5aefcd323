"""
URL Signer Exceptions
=====================
Exception classes raised while building signers and signing URLs.
"""


class UrlSignerError(Exception):
    """Base exception for all URL signer errors."""
    pass


class InvalidSignerKey(UrlSignerError):
    """Raised when a signer is created with an empty secret key."""

    def __init__(self, message: str = "signer key must not be empty"):
        super().__init__(message)


class InvalidUrlParameter(UrlSignerError):
    """Raised when signature/expiry parameter names are empty or identical."""
    pass


class InvalidUrl(UrlSignerError, ValueError):
    """Raised when a string cannot be parsed as an absolute URL."""

    def __init__(self, url, reason: str = "not an absolute url"):
        self.url = url
        self.reason = reason
        super().__init__(f"invalid url {url!r}: {reason}")


class ReservedParameterError(UrlSignerError, ValueError):
    """Raised when a URL to sign already carries a reserved parameter."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"url already contains signer parameter {parameter!r}")


class InvalidExpiration(UrlSignerError, ValueError):
    """Raised for expiration values that cannot be turned into epoch seconds."""
    pass


class UnsupportedAlgorithm(UrlSignerError):
    """Raised when a signature algorithm name is not registered."""
    pass
