from __future__ import annotations

import httpx
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from .config import AppConfig, get_settings
from .routes import health, system
from .services.shell import CommandExecutor


def create_app(
    settings: AppConfig | None = None,
    command_executor: CommandExecutor | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing the local Ollama probes."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Ollama Probe",
        version="0.1.0",
        description="Local diagnostics: is Ollama installed, running, and is its API answering.",
        contact={"name": "Ollama Probe Team"},
    )

    app.state.settings = settings
    # None means the real subprocess runner / network transport.
    app.state.command_executor = command_executor
    app.state.http_transport = http_transport

    # The desktop shell calls the API from its own origin in dev.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:1420",
            "http://127.0.0.1:1420",
            "tauri://localhost",
        ],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api")
    app.include_router(system.router, prefix="/api")

    @app.get("/api/config", tags=["config"])
    async def read_config() -> dict[str, object]:
        return {
            "agent_binary": settings.agent_binary,
            "agent_process": settings.agent_process,
            "ollama_base_url": settings.ollama_base_url,
            "api_version_url": settings.api_version_url,
            "command_timeout": settings.command_timeout,
        }

    return app
