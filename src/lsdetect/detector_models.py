"""Data types shared by the process detection strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple, Union

ListeningPorts = List[int]

MAX_TCP_PORT = 65535
MAX_PID = 0xFFFFFFFF


class DetectionMode(Enum):
    """
    Which Windows tool is used to look up the language-server process.

    LEGACY runs ``wmic`` and yields ``key=value`` lines. STRUCTURED runs
    PowerShell ``Get-CimInstance`` and yields JSON; it is selected once
    ``wmic`` has been found missing (Windows 10 21H1+ and Windows 11).
    """

    LEGACY = "legacy"
    STRUCTURED = "structured"

    @classmethod
    def from_flag(cls, use_powershell: bool) -> "DetectionMode":
        return cls.STRUCTURED if use_powershell else cls.LEGACY

    @property
    def uses_powershell(self) -> bool:
        return self is DetectionMode.STRUCTURED


@dataclass(frozen=True)
class ProcessInfo:
    """Connection parameters recovered from a language-server command line."""

    pid: int
    extension_port: int
    csrf_token: str

    def __post_init__(self) -> None:
        if isinstance(self.pid, bool) or self.pid <= 0:
            raise ValueError(f"pid must be a positive integer, got {self.pid!r}")
        if self.pid > MAX_PID:
            raise ValueError(f"pid must not exceed {MAX_PID}, got {self.pid!r}")
        if not 0 <= self.extension_port <= MAX_TCP_PORT:
            raise ValueError(f"extension_port must be between 0 and {MAX_TCP_PORT}, got {self.extension_port!r}")
        if not self.csrf_token:
            raise ValueError("csrf_token must be a non-empty string")

    @property
    def has_extension_port(self) -> bool:
        """False when the port flag was absent and must be discovered from netstat."""
        return self.extension_port > 0


@dataclass(frozen=True)
class ErrorMessages:
    """Fixed, mode-dependent strings shown when detection fails."""

    process_not_found: str
    command_not_available: str
    requirements: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Union[str, List[str]]]:
        return {
            "processNotFound": self.process_not_found,
            "commandNotAvailable": self.command_not_available,
            "requirements": list(self.requirements),
        }


__all__ = ["DetectionMode", "ErrorMessages", "ListeningPorts", "MAX_PID", "MAX_TCP_PORT", "ProcessInfo"]
