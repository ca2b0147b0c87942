from fastapi.testclient import TestClient

from ollama_probe_backend.app import create_app


def test_healthcheck(settings):
    client = TestClient(create_app(settings))
    response = client.get("/api/healthz")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "detail" in data
    assert data["platform"]
