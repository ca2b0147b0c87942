from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from ollama_probe_backend.app import create_app


@pytest.fixture
def client_for(settings):
    def build(executor=None, status: int | None = 200) -> TestClient:
        def handler(request: httpx.Request) -> httpx.Response:
            if status is None:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(status)

        app = create_app(settings, command_executor=executor, http_transport=httpx.MockTransport(handler))
        return TestClient(app)

    return build


def test_system_info_endpoint(client_for, on_platform, make_executor):
    on_platform("Linux", "x86_64")
    client = client_for(make_executor({"which ollama": 0, "pgrep -x ollama": 1}))

    response = client.get("/api/system/info")

    assert response.status_code == 200
    assert response.json() == {
        "os": "linux",
        "arch": "x86_64",
        "ollama_installed": True,
        "ollama_running": False,
    }


def test_system_info_survives_spawn_failure(client_for, on_platform, make_executor):
    on_platform("Windows", "AMD64")
    client = client_for(make_executor(error=FileNotFoundError("cmd")))

    response = client.get("/api/system/info")

    assert response.status_code == 200
    assert response.json()["ollama_installed"] is False
    assert response.json()["ollama_running"] is False


@pytest.mark.parametrize("status, alive", [(200, True), (404, False), (500, False), (None, False)])
def test_ollama_api_endpoint(client_for, status, alive):
    response = client_for(status=status).get("/api/system/ollama-api")
    assert response.status_code == 200
    assert response.json() == {"alive": alive, "url": "http://localhost:11434/api/version"}


def test_config_endpoint(client_for):
    data = client_for().get("/api/config").json()
    assert data["agent_binary"] == "ollama"
    assert data["api_version_url"] == "http://localhost:11434/api/version"
    assert data["command_timeout"] is None
