"""
Signed URL Middleware
=====================
Starlette middleware that only lets requests with a valid signed URL reach
protected paths (e.g. download links).
"""

from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
import structlog

from .config import get_url_signer
from .exceptions import InvalidUrl
from .signing import UrlSigner

logger = structlog.get_logger(__name__)

INVALID_URL_CODE = "invalid_url"


class SignedUrlMiddleware(BaseHTTPMiddleware):
    """
    Reject requests to protected paths unless their URL verifies.

    The URL is checked as the server sees it (``request.url``), so links must
    be signed for the public scheme, host and port the server receives.
    Fragments never reach the server and must not be part of signed links
    served through this middleware.
    """

    def __init__(
        self,
        app,
        signer: Optional[UrlSigner] = None,
        protected_prefixes: Iterable[str] = ("/",),
    ):
        super().__init__(app)
        self.signer = signer or get_url_signer()
        self.protected_prefixes = tuple(protected_prefixes)

    def _is_protected(self, path: str) -> bool:
        return path.startswith(self.protected_prefixes)

    async def dispatch(self, request: Request, call_next):
        """Verify the request URL on protected paths."""
        path = request.url.path

        if not self._is_protected(path):
            return await call_next(request)

        try:
            result = self.signer.check(str(request.url))
        except InvalidUrl as e:
            logger.warning("signed_url_blocked", path=path, code=INVALID_URL_CODE, error=e.reason)
            return self._forbidden_response(INVALID_URL_CODE)

        if not result.is_valid:
            logger.warning(
                "signed_url_blocked",
                path=path,
                method=request.method,
                code=result.status.value,
            )
            return self._forbidden_response(result.status.value)

        return await call_next(request)

    def _forbidden_response(self, code: str) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={
                "error": "invalid_signed_url",
                "message": "This link is invalid or has expired.",
                "code": code,
            },
        )
