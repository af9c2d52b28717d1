from unittest.mock import patch

from fastapi.testclient import TestClient

from api.routes.system import router as system_router

client = TestClient(system_router)


def test_get_version_unknown():
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "Unknown"}


@patch("api.routes.system.settings.GIT_SHA", "foo")
def test_get_version_known():
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "foo"}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ready_reports_tables():
    response = client.get("/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert set(body["tables"]) == {"admin", "lms"}
    assert body["tables"]["lms"] > 0


@patch("api.routes.system.get_translator")
def test_ready_unavailable_when_table_missing(mock_get_translator):
    mock_get_translator.side_effect = FileNotFoundError("no admin.yml")
    response = client.get("/ready")
    assert response.status_code == 503
    assert response.json() == {"status": "unavailable", "surface": "admin"}


def test_health_rate_limited(client):
    for _ in range(50):
        assert client.get("/health").status_code == 200
    response = client.get("/health")
    assert response.status_code == 429
    assert response.json() == {"message": "Rate limit exceeded"}
