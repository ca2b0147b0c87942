from __future__ import annotations

import logging
import subprocess
from functools import partial
from typing import Callable, Mapping

from ..config import AppConfig, get_settings
from ..models.system import PlatformFamily, ProbeOutcome
from .shell import CommandExecutor, cmd_command, run_command, shell_command

LOGGER = logging.getLogger(__name__)

# Builds the command line for a platform, or None when nothing can be probed there.
CommandBuilder = Callable[[AppConfig], list[str] | None]


def _unsupported(_: AppConfig) -> None:
    return None


INSTALLED_COMMANDS: Mapping[PlatformFamily, CommandBuilder] = {
    PlatformFamily.MACOS: lambda s: shell_command(f"which {s.agent_binary}"),
    PlatformFamily.LINUX: lambda s: shell_command(f"which {s.agent_binary}"),
    PlatformFamily.WINDOWS: lambda s: cmd_command(f"where {s.agent_binary}"),
    PlatformFamily.OTHER: _unsupported,
}

# pgrep -x matches the whole process name; findstr exits 0 only when a line matched.
RUNNING_COMMANDS: Mapping[PlatformFamily, CommandBuilder] = {
    PlatformFamily.MACOS: lambda s: shell_command(f"pgrep -x {s.agent_process}"),
    PlatformFamily.LINUX: lambda s: shell_command(f"pgrep -x {s.agent_process}"),
    PlatformFamily.WINDOWS: lambda s: cmd_command(f"tasklist | findstr {s.agent_process}"),
    PlatformFamily.OTHER: _unsupported,
}


def _require_all_platforms(name: str, table: Mapping[PlatformFamily, CommandBuilder]) -> None:
    missing = set(PlatformFamily) - set(table)
    if missing:
        raise RuntimeError(f"{name} has no handler for: {', '.join(sorted(m.value for m in missing))}")


_require_all_platforms("INSTALLED_COMMANDS", INSTALLED_COMMANDS)
_require_all_platforms("RUNNING_COMMANDS", RUNNING_COMMANDS)


def _default_executor(settings: AppConfig) -> CommandExecutor:
    return partial(run_command, timeout=settings.command_timeout)


def _run_probe(
    label: str,
    table: Mapping[PlatformFamily, CommandBuilder],
    os_family: PlatformFamily | str,
    executor: CommandExecutor | None,
    settings: AppConfig | None,
) -> ProbeOutcome:
    settings = settings or get_settings()
    family = PlatformFamily.from_os(os_family)
    argv = table[family](settings)
    if argv is None:
        LOGGER.debug("%s probe skipped on unsupported platform %r", label, os_family)
        return ProbeOutcome.INDETERMINATE

    run = executor or _default_executor(settings)
    try:
        status = run(argv)
    except (OSError, subprocess.SubprocessError) as exc:
        LOGGER.debug("%s probe could not run %s: %s", label, argv, exc)
        return ProbeOutcome.INDETERMINATE

    LOGGER.debug("%s probe %s exited with %s", label, argv, status)
    return ProbeOutcome.PRESENT if status == 0 else ProbeOutcome.ABSENT


def detect_installed(
    os_family: PlatformFamily | str,
    executor: CommandExecutor | None = None,
    settings: AppConfig | None = None,
) -> ProbeOutcome:
    return _run_probe("installed", INSTALLED_COMMANDS, os_family, executor, settings)


def detect_running(
    os_family: PlatformFamily | str,
    executor: CommandExecutor | None = None,
    settings: AppConfig | None = None,
) -> ProbeOutcome:
    return _run_probe("running", RUNNING_COMMANDS, os_family, executor, settings)


def probe_installed(
    os_family: PlatformFamily | str,
    executor: CommandExecutor | None = None,
    settings: AppConfig | None = None,
) -> bool:
    """True when the agent binary is on the executable search path. Never raises."""
    return detect_installed(os_family, executor, settings).found


def probe_running(
    os_family: PlatformFamily | str,
    executor: CommandExecutor | None = None,
    settings: AppConfig | None = None,
) -> bool:
    """True when a process with exactly the agent's name is running. Never raises."""
    return detect_running(os_family, executor, settings).found
