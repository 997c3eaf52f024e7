"""Paths that bypass authentication, API key and rate limit gating."""

PUBLIC_PATHS = ("/health", "/api-docs")


def is_public_path(path: str) -> bool:
    """True for the health check and the documentation pages."""
    return any(path == p or path.startswith(p + "/") for p in PUBLIC_PATHS)


def bearer_token(auth_header: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    return auth_header[7:].strip() or None
