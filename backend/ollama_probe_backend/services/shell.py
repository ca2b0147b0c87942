"""Command execution used by the subprocess-based probes."""

from __future__ import annotations

import subprocess
from typing import Callable, Sequence

CommandExecutor = Callable[[Sequence[str]], int]


def run_command(argv: Sequence[str], timeout: float | None = None) -> int:
    """Run argv and return its exit status. Spawn errors and timeouts propagate to the caller."""
    proc = subprocess.run(list(argv), capture_output=True, timeout=timeout)
    return proc.returncode


def shell_command(command: str) -> list[str]:
    return ["sh", "-c", command]


def cmd_command(command: str) -> list[str]:
    return ["cmd", "/C", command]
