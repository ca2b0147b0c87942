from __future__ import annotations

import platform

from ..models.system import PlatformInfo

_OS_NAMES = {
    "darwin": "macos",
    "linux": "linux",
    "windows": "windows",
}


def resolve_platform() -> PlatformInfo:
    """
    Identify the host OS family and CPU architecture.
    Unknown systems come back under their own lowercase name (e.g. "freebsd"); the architecture is
    reported exactly as the interpreter sees it.
    """
    system = platform.system().lower()
    return PlatformInfo(os=_OS_NAMES.get(system, system or "unknown"), arch=platform.machine())


def system_probe() -> str:
    """One-line host summary used by the health endpoint."""
    return f"{platform.system()} {platform.release()} ({platform.machine()})"
