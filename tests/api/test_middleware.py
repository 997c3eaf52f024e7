"""Middleware chain tests."""

from falcon.testing import TestClient

from tests.api.conftest import ALICE_AUTH


class TestSecurityHeaders:
    def test_headers_on_api_response(self, client: TestClient) -> None:
        r = client.simulate_get("/api/collections", headers=ALICE_AUTH)
        assert r.headers["X-Content-Type-Options"] == "nosniff"
        assert r.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" in r.headers

    def test_headers_on_error_response(self, client: TestClient) -> None:
        r = client.simulate_get("/api/collections")
        assert r.status_code == 401
        assert r.headers["X-Content-Type-Options"] == "nosniff"

    def test_docs_page_without_csp(self, client: TestClient) -> None:
        r = client.simulate_get("/api-docs")
        assert "Content-Security-Policy" not in r.headers


class TestCORS:
    def test_allow_all_origins(self, client: TestClient) -> None:
        r = client.simulate_get(
            "/health", headers={"Origin": "https://frontend.example"}
        )
        assert r.headers["Access-Control-Allow-Origin"] == "*"

    def test_preflight_skips_auth(self, client: TestClient) -> None:
        r = client.simulate_options(
            "/api/collections",
            headers={
                "Origin": "https://frontend.example",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert r.status_code == 204
        assert "POST" in r.headers["Access-Control-Allow-Methods"]


class TestAPIKey:
    def test_missing_key(self, api_key_client: TestClient) -> None:
        r = api_key_client.simulate_get("/api/collections", headers=ALICE_AUTH)
        assert r.status_code == 401
        assert r.json["error"]["code"] == "API_KEY_REQUIRED"

    def test_wrong_key(self, api_key_client: TestClient) -> None:
        r = api_key_client.simulate_get(
            "/api/collections", headers={**ALICE_AUTH, "x-api-key": "guess"}
        )
        assert r.status_code == 403
        assert r.json["error"]["code"] == "INVALID_API_KEY"

    def test_correct_key(self, api_key_client: TestClient) -> None:
        r = api_key_client.simulate_get(
            "/api/collections", headers={**ALICE_AUTH, "x-api-key": "s3cret"}
        )
        assert r.status_code == 200

    def test_health_needs_no_key(self, api_key_client: TestClient) -> None:
        assert api_key_client.simulate_get("/health").status_code == 200

    def test_docs_declare_api_key_security(self, api_key_client: TestClient) -> None:
        document = api_key_client.simulate_get("/api-docs/openapi.json").json
        assert document["security"] == [{"BearerAuth": [], "ApiKeyAuth": []}]


class TestRateLimit:
    def test_budget_exhausted(self, rate_limited_client: TestClient) -> None:
        first = rate_limited_client.simulate_get("/api/collections", headers=ALICE_AUTH)
        assert first.headers["RateLimit-Limit"] == "2"
        assert first.headers["RateLimit-Remaining"] == "1"
        rate_limited_client.simulate_get("/api/collections", headers=ALICE_AUTH)

        r = rate_limited_client.simulate_get("/api/collections", headers=ALICE_AUTH)
        assert r.status_code == 429
        assert r.json["error"]["code"] == "RATE_LIMIT_EXCEEDED"
        assert int(r.headers["Retry-After"]) > 0

    def test_health_not_counted(self, rate_limited_client: TestClient) -> None:
        for _ in range(5):
            assert rate_limited_client.simulate_get("/health").status_code == 200


class TestErrorEnvelope:
    def test_unknown_route(self, anonymous_client: TestClient) -> None:
        r = anonymous_client.simulate_get("/nowhere")
        assert r.status_code == 404
        assert r.json["error"]["code"] == "ROUTE_NOT_FOUND"
        assert r.json["error"]["status"] == 404

    def test_method_not_allowed(self, anonymous_client: TestClient) -> None:
        r = anonymous_client.simulate_patch("/api/collections")
        assert r.status_code == 405
        assert r.json["error"]["code"] == "METHOD_NOT_ALLOWED"
