"""Security headers middleware."""

import falcon.asgi

DEFAULT_CSP = "default-src 'none'; frame-ancestors 'none'"
DOCS_PATH = "/api-docs"


class SecurityHeadersMiddleware:
    """Adds browser hardening headers to every response.

    The docs page loads Swagger UI assets from a CDN, so it is served without
    the restrictive Content-Security-Policy.
    """

    def __init__(self, hsts: bool = False, hsts_max_age: int = 15552000) -> None:
        self._hsts = hsts
        self._hsts_max_age = hsts_max_age

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        resp.set_header("X-Content-Type-Options", "nosniff")
        resp.set_header("X-Frame-Options", "DENY")
        resp.set_header("Referrer-Policy", "no-referrer")
        resp.set_header("Cross-Origin-Resource-Policy", "same-origin")
        if req.path != DOCS_PATH:
            resp.set_header("Content-Security-Policy", DEFAULT_CSP)
        if self._hsts:
            resp.set_header(
                "Strict-Transport-Security", f"max-age={self._hsts_max_age}; includeSubDomains"
            )
