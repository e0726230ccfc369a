from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# The page is server-rendered with no scripts; only the stylesheet and the
# inline star-grid styles need to load.
DEFAULT_CSP = (
    "default-src 'self'; "
    "script-src 'none'; "
    "style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data:; "
    "form-action 'self'; "
    "frame-ancestors 'none'"
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds security headers to every response.

    HSTS is only sent when ``hsts`` is enabled, since the app is often run
    over plain HTTP on a local network.
    """

    def __init__(
        self,
        app,
        *,
        hsts: bool = False,
        hsts_max_age: int = 31536000,  # 1 year in seconds
        content_security_policy: str | None = None,
        referrer_policy: str = "same-origin",
    ):
        super().__init__(app)
        self.hsts = hsts
        self.hsts_max_age = hsts_max_age
        self.content_security_policy = content_security_policy or DEFAULT_CSP
        self.referrer_policy = referrer_policy

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        if self.hsts:
            response.headers["Strict-Transport-Security"] = f"max-age={self.hsts_max_age}"

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Content-Security-Policy"] = self.content_security_policy
        response.headers["Referrer-Policy"] = self.referrer_policy
        # Session cookies travel in these responses
        response.headers.setdefault("Cache-Control", "no-store")

        return response
