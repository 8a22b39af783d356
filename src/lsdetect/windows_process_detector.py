"""Windows language-server detection using wmic, PowerShell and netstat."""

from __future__ import annotations

import logging
from typing import Optional

from .config.detector import DetectorSettings, get_detector_settings
from .detector_models import DetectionMode, ErrorMessages, ListeningPorts, ProcessInfo
from .windows_detector_helpers import (
    build_port_list_command,
    build_process_list_command,
    get_error_messages,
    parse_listening_ports,
    parse_process_info,
)

logger = logging.getLogger(__name__)


class WindowsProcessDetector:
    """
    Detection strategy for Windows.

    Starts in LEGACY (wmic) mode. Once the caller finds ``wmic`` missing
    it switches the detector to STRUCTURED (PowerShell) mode. The mode is
    not synchronized; use one detector per detection session.
    """

    def __init__(self, mode: DetectionMode = DetectionMode.LEGACY, *, default_process_name: Optional[str] = None):
        self._mode = mode
        self._default_process_name = default_process_name

    @classmethod
    def from_settings(cls, settings: Optional[DetectorSettings] = None) -> "WindowsProcessDetector":
        """Build a detector whose initial mode and process name come from configuration."""
        resolved = settings if settings is not None else get_detector_settings()
        return cls(resolved.mode, default_process_name=resolved.process_name)

    @property
    def mode(self) -> DetectionMode:
        return self._mode

    def set_mode(self, mode: DetectionMode) -> None:
        if mode is not self._mode:
            logger.info("Switching process detection mode from %s to %s", self._mode.value, mode.value)
        self._mode = mode

    def set_use_powershell(self, value: bool) -> None:
        self.set_mode(DetectionMode.from_flag(value))

    def is_using_powershell(self) -> bool:
        return self._mode.uses_powershell

    def get_process_list_command(self, process_name: Optional[str] = None) -> str:
        """
        Return the process lookup command for the current mode.

        Without ``process_name`` the configured default is used.

        Raises:
            ValueError: If no process name is given or configured
        """
        name = process_name if process_name is not None else self._default_process_name
        if name is None:
            raise ValueError("process_name is required when no default process name is configured")
        return build_process_list_command(name, self._mode)

    def parse_process_info(self, stdout: str) -> Optional[ProcessInfo]:
        return parse_process_info(stdout, self._mode)

    def get_port_list_command(self, pid: int) -> str:
        return build_port_list_command(pid)

    def parse_listening_ports(self, stdout: str, *, pid: Optional[int] = None) -> ListeningPorts:
        return parse_listening_ports(stdout, pid=pid)

    def get_error_messages(self) -> ErrorMessages:
        return get_error_messages(self._mode)


__all__ = ["WindowsProcessDetector"]
