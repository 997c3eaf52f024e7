"""API documentation endpoints - Swagger UI page and OpenAPI document."""

from typing import Any

import falcon
import falcon.asgi

SWAGGER_UI_VERSION = "5"

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({{url: "{document_url}", dom_id: "#swagger-ui"}});
  </script>
</body>
</html>
"""


class DocsResource:
    """GET /api-docs (HTML) and /api-docs/openapi.json."""

    def __init__(
        self, document: dict[str, Any], document_url: str = "/api-docs/openapi.json"
    ) -> None:
        self._document = document
        self._document_url = document_url

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.content_type = falcon.MEDIA_HTML
        resp.text = _PAGE.format(
            title=self._document["info"]["title"],
            version=SWAGGER_UI_VERSION,
            document_url=self._document_url,
        )
        resp.status = falcon.HTTP_200

    async def on_get_openapi(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = self._document
        resp.status = falcon.HTTP_200
