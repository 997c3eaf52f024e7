"""Health check endpoint."""

import falcon.asgi

SERVICE_NAME = "collection_service"


class HealthResource:
    """Liveness endpoint; bypasses auth and rate limiting."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health - liveness.
        ---
        summary: Service health
        tags: [Health]
        security: []
        responses:
          "200":
            description: Service is up
            content:
              application/json:
                example: {status: OK, service: collection_service}
        """
        resp.media = {"status": "OK", "service": SERVICE_NAME}
        resp.status = falcon.HTTP_200
