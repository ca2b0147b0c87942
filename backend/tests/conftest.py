from __future__ import annotations

from typing import Sequence

import pytest

from ollama_probe_backend.config import AppConfig, reset_settings_cache


class RecordingExecutor:
    """Stands in for the subprocess runner: maps a command line to an exit status and records calls."""

    def __init__(self, statuses: dict[str, int] | None = None, default: int = 1, error: Exception | None = None):
        self.statuses = statuses or {}
        self.default = default
        self.error = error
        self.calls: list[list[str]] = []

    def __call__(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return self.statuses.get(argv[-1], self.default)


@pytest.fixture
def settings(monkeypatch) -> AppConfig:
    for name in ("AGENT_BINARY", "AGENT_PROCESS", "OLLAMA_BASE_URL", "API_VERSION_PATH", "COMMAND_TIMEOUT"):
        monkeypatch.delenv(f"OLLAMA_PROBE_{name}", raising=False)
    reset_settings_cache()
    return AppConfig(_env_file=None)


@pytest.fixture
def make_executor():
    return RecordingExecutor


@pytest.fixture
def on_platform(monkeypatch):
    """Pretend the interpreter runs on the given platform.system() value."""

    def apply(system: str, machine: str = "x86_64") -> None:
        monkeypatch.setattr("ollama_probe_backend.services.system.platform.system", lambda: system)
        monkeypatch.setattr("ollama_probe_backend.services.system.platform.machine", lambda: machine)

    return apply
