"""
Tests for the items API endpoints.

Exercises the full HTTP stack: routing, request validation,
outcome rendering, CORS, security headers, and rate limiting.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.shared.security.headers import SECURE_HEADERS


@pytest.fixture
def client() -> TestClient:
    """A client bound to a fresh application with an empty store."""
    return TestClient(create_app(Settings(rate_limit_enabled=False)))


class TestItemScenario:
    """End-to-end create/read/update/delete walk-through."""

    def test_full_lifecycle(self, client: TestClient) -> None:
        response = client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        assert response.status_code == 201
        assert response.text == "Item created successfully"

        response = client.get("/api/items/1")
        assert response.status_code == 200
        assert response.text == "Alice"

        response = client.put("/api/items/1", params={"value": "Bob"})
        assert response.status_code == 200
        assert response.text == "Item updated successfully"

        response = client.get("/api/items/1")
        assert response.status_code == 200
        assert response.text == "Bob"

        response = client.delete("/api/items/1")
        assert response.status_code == 200
        assert response.text == "Item deleted successfully"

        response = client.get("/api/items/1")
        assert response.status_code == 404
        assert response.text == "Item not found"

    def test_responses_are_plain_text(self, client: TestClient) -> None:
        response = client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        assert response.headers["content-type"].startswith("text/plain")


class TestListEndpoint:
    """Tests for GET /api/items."""

    def test_returns_placeholder(self, client: TestClient) -> None:
        response = client.get("/api/items")
        assert response.status_code == 200
        assert response.text == "e"

    def test_placeholder_ignores_store(self, client: TestClient) -> None:
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        assert client.get("/api/items").text == "e"


class TestGetEndpoint:
    """Tests for GET /api/items/{id}."""

    @pytest.mark.parametrize("item_id", [0, 1, 999, -3])
    def test_unknown_id_is_404(self, client: TestClient, item_id: int) -> None:
        response = client.get(f"/api/items/{item_id}")
        assert response.status_code == 404
        assert response.text == "Item not found"

    def test_non_integer_id_is_validation_error(self, client: TestClient) -> None:
        response = client.get("/api/items/abc")
        body = response.json()
        assert response.status_code == 400
        assert body["error"] == "Validation Error"
        assert "item_id" in body["errors"]


class TestCreateEndpoint:
    """Tests for POST /api/items."""

    def test_duplicate_is_409(self, client: TestClient) -> None:
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        response = client.post("/api/items", json={"id": 1, "firstName": "Bob"})
        assert response.status_code == 409
        assert response.text == "Item already exists"
        assert client.get("/api/items/1").text == "Alice"

    def test_extra_fields_are_ignored(self, client: TestClient) -> None:
        response = client.post(
            "/api/items",
            json={"id": 2, "firstName": "Alice", "lastName": "Liddell", "age": 7},
        )
        assert response.status_code == 201
        assert client.get("/api/items/2").text == "Alice"

    def test_long_last_name_is_accepted(self, client: TestClient) -> None:
        """lastName carries no length constraint."""
        response = client.post(
            "/api/items", json={"id": 3, "firstName": "Alice", "lastName": "L" * 1000}
        )
        assert response.status_code == 201

    def test_missing_first_name_is_validation_error(self, client: TestClient) -> None:
        """A body without firstName yields the 400 validation payload."""
        response = client.post("/api/items", json={"id": 1})
        body = response.json()

        assert response.status_code == 400
        assert body["status"] == 400
        assert body["error"] == "Validation Error"
        assert body["message"] == "Validation failed for one or more arguments."
        assert "firstName" in body["errors"]
        assert body["path"] == "/api/error"
        assert client.get("/api/items/1").status_code == 404

    def test_null_first_name_is_validation_error(self, client: TestClient) -> None:
        response = client.post("/api/items", json={"id": 1, "firstName": None})
        assert response.status_code == 400
        assert "firstName" in response.json()["errors"]

    def test_every_failed_field_is_reported(self, client: TestClient) -> None:
        response = client.post("/api/items", json={"id": "not-a-number"})
        errors = response.json()["errors"]
        assert response.status_code == 400
        assert {"id", "firstName"} <= set(errors)

    def test_missing_body_is_validation_error(self, client: TestClient) -> None:
        response = client.post("/api/items")
        assert response.status_code == 400
        assert response.json()["error"] == "Validation Error"


class TestUpdateEndpoint:
    """Tests for PUT /api/items/{id}."""

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.put("/api/items/1", params={"value": "Bob"})
        assert response.status_code == 404
        assert response.text == "Item not found"
        assert client.get("/api/items/1").status_code == 404

    def test_same_value_update_succeeds(self, client: TestClient) -> None:
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        response = client.put("/api/items/1", params={"value": "Alice"})
        assert response.status_code == 200
        assert response.text == "Item updated successfully"

    def test_missing_value_is_validation_error(self, client: TestClient) -> None:
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        response = client.put("/api/items/1")
        assert response.status_code == 400
        assert "value" in response.json()["errors"]

    def test_form_encoded_value(self, client: TestClient) -> None:
        """A form body carries value just like the query string does."""
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})

        response = client.put("/api/items/1", data={"value": "Updated Item"})

        assert response.status_code == 200
        assert response.text == "Item updated successfully"
        assert client.get("/api/items/1").text == "Updated Item"

    def test_form_encoded_value_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.put("/api/items/9", data={"value": "x"})
        assert response.status_code == 404
        assert response.text == "Item not found"

    def test_query_value_wins_over_form(self, client: TestClient) -> None:
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})

        client.put("/api/items/1", params={"value": "from-query"}, data={"value": "from-form"})

        assert client.get("/api/items/1").text == "from-query"

    def test_form_without_value_is_validation_error(self, client: TestClient) -> None:
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        response = client.put("/api/items/1", data={"other": "x"})
        assert response.status_code == 400
        assert "value" in response.json()["errors"]
        assert client.get("/api/items/1").text == "Alice"


class TestDeleteEndpoint:
    """Tests for DELETE /api/items/{id}."""

    def test_second_delete_is_404(self, client: TestClient) -> None:
        client.post("/api/items", json={"id": 1, "firstName": "Alice"})
        assert client.delete("/api/items/1").status_code == 200

        response = client.delete("/api/items/1")

        assert response.status_code == 404
        assert response.text == "Item not found"


class TestStoreIsolation:
    def test_apps_do_not_share_records(self) -> None:
        first = TestClient(create_app(Settings(rate_limit_enabled=False)))
        second = TestClient(create_app(Settings(rate_limit_enabled=False)))
        first.post("/api/items", json={"id": 1, "firstName": "Alice"})
        assert second.get("/api/items/1").status_code == 404


class TestCors:
    """Cross-origin requests are allowed from any origin."""

    def test_simple_request_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/api/items", headers={"Origin": "https://example.org"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/api/items/1",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "PUT",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "PUT" in response.headers["access-control-allow-methods"]


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        """All security headers must be present on every response."""
        for response in (
            client.get("/api/items"),
            client.get("/api/items/404"),
            client.post("/api/items", json={}),
        ):
            for header_name, header_value in SECURE_HEADERS.items():
                assert response.headers[header_name] == header_value


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self) -> None:
        """Exceeding rate limit returns HTTP 429."""
        limited = TestClient(create_app(Settings(rate_limit_default="2/minute")))

        statuses = [limited.get("/api/items").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]
        response = limited.get("/api/items")
        assert response.status_code == 429
        assert response.json()["error"] == "Rate limit exceeded"

    def test_limit_applies_to_item_routes(self) -> None:
        """Every item route is throttled, not just the first one matched."""
        limited = TestClient(create_app(Settings(rate_limit_default="1/minute")))
        limited.post("/api/items", json={"id": 1, "firstName": "Alice"})

        assert limited.get("/api/items/1").status_code == 200
        assert limited.get("/api/items/1").status_code == 429
        assert limited.post("/api/items", json={"id": 2, "firstName": "Bob"}).status_code == 429

    def test_app_routes_expose_endpoints(self) -> None:
        """The rate limiter resolves handlers from app.routes."""
        app = create_app()
        api_paths = {getattr(route, "path", None) for route in app.routes}
        assert "/api/items/{item_id}" in api_paths
        assert all(
            hasattr(route, "endpoint") for route in app.routes if route.path.startswith("/api")
        )

    def test_disabled_limiter_never_throttles(self, client: TestClient) -> None:
        assert all(client.get("/api/items").status_code == 200 for _ in range(100))
