"""Error handlers rendering the JSON error envelope."""

import falcon
import falcon.asgi

from collection_service.domain.exceptions import CollectionServiceError, RateLimitExceeded
from collection_service.logging import get_logger

logger = get_logger(__name__)

_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "ROUTE_NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "PAYLOAD_TOO_LARGE",
    415: "UNSUPPORTED_MEDIA_TYPE",
}


def error_body(code: str, message: str, status: int, details=None) -> dict:
    error: dict = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    error["status"] = status
    return {"error": error}


async def handle_service_error(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    ex: CollectionServiceError,
    params: dict,
) -> None:
    """Render a typed domain failure with its own status and code."""
    if ex.status >= 500:
        logger.error("Request failed", path=req.path, code=ex.code, message=ex.message)
    resp.status = falcon.code_to_http_status(ex.status)
    resp.media = ex.to_dict()
    if isinstance(ex, RateLimitExceeded):
        resp.set_header("Retry-After", str(ex.retry_after))


async def handle_http_error(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    ex: falcon.HTTPError,
    params: dict,
) -> None:
    """Render framework errors (unknown route, bad method) in the same envelope."""
    status = falcon.http_status_to_code(ex.status)
    resp.status = falcon.code_to_http_status(status)
    if ex.headers:
        resp.set_headers(ex.headers)
    resp.media = error_body(
        _HTTP_ERROR_CODES.get(status, "HTTP_ERROR"),
        ex.description or ex.title or "Request failed",
        status,
    )


async def handle_unexpected_error(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    ex: Exception,
    params: dict,
) -> None:
    """Log the traceback and return a generic 500."""
    logger.exception("Unhandled exception", path=req.path, method=req.method)
    resp.status = falcon.HTTP_500
    resp.media = error_body("INTERNAL_ERROR", "Internal Server Error", 500)


def register_error_handlers(app: falcon.asgi.App) -> None:
    # Falcon picks the most specific registered handler by exception MRO
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(falcon.HTTPError, handle_http_error)
    app.add_error_handler(CollectionServiceError, handle_service_error)
