from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PlatformFamily(str, Enum):
    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    OTHER = "other"

    @classmethod
    def from_os(cls, value: str | PlatformFamily) -> PlatformFamily:
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.OTHER


class ProbeOutcome(str, Enum):
    """Result of a single probe before it is collapsed to a boolean."""

    PRESENT = "present"
    ABSENT = "absent"
    INDETERMINATE = "indeterminate"

    @property
    def found(self) -> bool:
        return self is ProbeOutcome.PRESENT


class PlatformInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: str
    arch: str

    @property
    def family(self) -> PlatformFamily:
        return PlatformFamily.from_os(self.os)


class SystemReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: str
    arch: str
    ollama_installed: bool
    ollama_running: bool

    @property
    def installed(self) -> bool:
        return self.ollama_installed

    @property
    def running(self) -> bool:
        return self.ollama_running


class ApiStatus(BaseModel):
    alive: bool
    url: str
