"""Tests for the application-level endpoints."""

from fastapi.testclient import TestClient

from greenbite.presentation.api.app import API_VERSION


def test_health(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": API_VERSION}


def test_root_describes_api(test_client: TestClient):
    response = test_client.get("/")

    assert response.status_code == 200
    assert response.json()["version"] == API_VERSION


def test_unknown_route_uses_error_shape(test_client: TestClient, api_prefix):
    response = test_client.get(f"{api_prefix}/nope")

    assert response.status_code == 404
    assert response.json()["code"] == "ENTITY_NOT_FOUND"
