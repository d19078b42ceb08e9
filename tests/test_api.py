"""Tests for the Resumify application object and its read-only routes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from resumify.api.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:
    """The liveness probe."""

    def test_reports_status_and_layouts(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "layouts": 16}


class TestLayouts:
    """The layout gallery."""

    def test_gallery_order(self, client: TestClient) -> None:
        data = client.get("/api/layouts").json()
        assert len(data) == 16
        assert data[0] == {
            "id": "korina-villanueva",
            "name": "Korina Villanueva",
            "description": "Elegant two-column with light beige sidebar",
        }
        assert data[-1]["id"] == "phylis-flex"


class TestApplication:
    """Metadata and middleware wiring."""

    def test_metadata(self) -> None:
        assert (app.title, app.version) == ("Resumify API", "0.1.0")

    def test_cors_enabled(self) -> None:
        assert any(m.cls.__name__ == "CORSMiddleware" for m in app.user_middleware)

    def test_unknown_path(self, client: TestClient) -> None:
        assert client.get("/api/nope").status_code == 404

    def test_openapi_lists_editor_routes(self, client: TestClient) -> None:
        paths = client.get("/openapi.json").json()["paths"]
        assert "/api/documents/{document_id}/leaves/{handle}" in paths
        assert "/api/documents/{document_id}/generate" in paths
        assert "/api/documents/{document_id}/open" in paths
        assert "/api/resumes/{resume_id}" in paths
