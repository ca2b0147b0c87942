from __future__ import annotations

from ..config import AppConfig, get_settings
from ..models.system import PlatformInfo, SystemReport
from .probes import probe_installed, probe_running
from .shell import CommandExecutor
from .system import resolve_platform


def build_report(
    executor: CommandExecutor | None = None,
    settings: AppConfig | None = None,
    platform_info: PlatformInfo | None = None,
) -> SystemReport:
    """Resolve the platform once and run both probes against it."""
    settings = settings or get_settings()
    info = platform_info or resolve_platform()
    return SystemReport(
        os=info.os,
        arch=info.arch,
        ollama_installed=probe_installed(info.family, executor, settings),
        ollama_running=probe_running(info.family, executor, settings),
    )
