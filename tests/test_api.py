"""HTTP behaviour of the router through the FastAPI app."""

from __future__ import annotations

import json
import re
import time
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

GREETING = "Hello World!\n"


class TestGreeting:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == GREETING

    @pytest.mark.parametrize("path", ["/nonexistent", "/health_check", "/healthcheck", "/a/b/c", "/health/"])
    def test_catch_all_in_permissive_mode(self, client: TestClient, path: str) -> None:
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == GREETING

    @pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
    def test_framework_doc_routes_are_not_exposed(self, client: TestClient, path: str) -> None:
        response = client.get(path)
        assert response.status_code == 200
        assert response.text == GREETING

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"])
    def test_method_is_ignored(self, client: TestClient, method: str) -> None:
        response = client.request(method, "/")
        assert response.status_code == 200
        assert response.text == GREETING

    @pytest.mark.parametrize("method", ["PROPFIND", "MKCOL", "FOO"])
    def test_non_standard_method_is_ignored(self, client: TestClient, method: str) -> None:
        response = client.request(method, "/anything")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == GREETING

    def test_percent_encoded_path_is_not_decoded_before_matching(self, client: TestClient) -> None:
        response = client.get("/%68ealth")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == GREETING


class TestHealth:
    def test_health_body(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"

        body = response.json()
        assert list(body) == ["status", "uptime", "timestamp", "service"]
        assert body["status"] == "ok"
        assert body["service"] == "hello-world"
        assert isinstance(body["uptime"], float)
        assert body["uptime"] >= 0
        assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None

    def test_body_is_compact_json(self, client: TestClient) -> None:
        raw = client.get("/health").text
        assert raw.startswith('{"status":"ok",')
        assert json.loads(raw)["status"] == "ok"

    def test_query_string_does_not_affect_routing(self, client: TestClient) -> None:
        response = client.get("/health", params={"verbose": "1"})
        assert response.headers["content-type"] == "application/json"

    def test_post_is_answered_like_get(self, client: TestClient) -> None:
        response = client.post("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_non_standard_method_is_answered_like_get(self, client: TestClient) -> None:
        response = client.request("PROPFIND", "/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_uptime_and_timestamp_do_not_decrease(self, client: TestClient) -> None:
        first = client.get("/health").json()
        time.sleep(0.01)
        second = client.get("/health").json()

        assert second["uptime"] > first["uptime"]
        assert datetime.fromisoformat(second["timestamp"]) >= datetime.fromisoformat(first["timestamp"])

    def test_service_name_from_settings(self, make_settings) -> None:
        from hello_service.api.app import create_app

        with TestClient(create_app(make_settings(service_name="greeter"))) as custom:
            assert custom.get("/health").json()["service"] == "greeter"


class TestStrictRouting:
    def test_root_still_greets(self, strict_client: TestClient) -> None:
        response = strict_client.get("/")
        assert response.status_code == 200
        assert response.text == GREETING

    def test_health_still_served(self, strict_client: TestClient) -> None:
        response = strict_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.parametrize("path", ["/nonexistent", "/health_check", "/healthcheck"])
    def test_unrouted_path_is_404(self, strict_client: TestClient, path: str) -> None:
        response = strict_client.get(path)
        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"error": "Not Found", "path": path}

    def test_404_ignores_method(self, strict_client: TestClient) -> None:
        assert strict_client.delete("/nonexistent").status_code == 404

    def test_404_for_non_standard_method(self, strict_client: TestClient) -> None:
        response = strict_client.request("FOO", "/nonexistent")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "path": "/nonexistent"}

    def test_404_echoes_raw_path(self, strict_client: TestClient) -> None:
        response = strict_client.get("/%68ealth")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "path": "/%68ealth"}


class TestRequestId:
    def test_request_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/", headers={"X-Request-Id": "abc-123"})
        assert response.headers["X-Request-Id"] == "abc-123"

    def test_request_id_is_generated(self, client: TestClient) -> None:
        response = client.get("/health")
        assert re.fullmatch(r"[0-9a-f]{32}", response.headers["X-Request-Id"])

    def test_request_id_on_not_found(self, strict_client: TestClient) -> None:
        response = strict_client.get("/missing", headers={"X-Request-Id": "req-404"})
        assert response.status_code == 404
        assert response.headers["X-Request-Id"] == "req-404"
