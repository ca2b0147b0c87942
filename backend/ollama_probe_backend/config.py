from __future__ import annotations

import re
from functools import lru_cache

import httpx
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SAFE_NAME = re.compile(r"[A-Za-z0-9._+-]+")


class AppConfig(BaseSettings):
    agent_binary: str = "ollama"   # looked up on the executable search path
    agent_process: str = "ollama"  # matched exactly against running process names

    ollama_base_url: str = "http://localhost:11434"
    api_version_path: str = "/api/version"

    # Subprocess probes wait for exit unless a deadline is set here.
    command_timeout: float | None = None

    model_config = SettingsConfigDict(env_file=".env", env_prefix="OLLAMA_PROBE_", extra="ignore")

    @field_validator("agent_binary", "agent_process")
    @classmethod
    def _shell_safe(cls, value: str) -> str:
        # Both names end up inside a shell command line.
        if not _SAFE_NAME.fullmatch(value):
            raise ValueError(f"unsafe agent name: {value!r}")
        return value

    @field_validator("ollama_base_url")
    @classmethod
    def _valid_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("ollama_base_url must not be empty")
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as exc:
            raise ValueError(f"invalid ollama_base_url {value!r}: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"ollama_base_url must be an http(s) URL with a host: {value!r}")
        if url.port is not None and not 0 < url.port <= 65535:
            raise ValueError(f"ollama_base_url port out of range: {url.port}")
        return value

    @field_validator("api_version_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith("/") else f"/{value}"

    @field_validator("command_timeout")
    @classmethod
    def _positive_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("command_timeout must be positive")
        return value

    @property
    def api_version_url(self) -> str:
        return f"{self.ollama_base_url}{self.api_version_path}"


@lru_cache(maxsize=1)
def get_settings() -> AppConfig:
    return AppConfig()


def reset_settings_cache() -> None:
    get_settings.cache_clear()
