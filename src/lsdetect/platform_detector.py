"""
Platform-specific language-server detection.

Each supported OS provides one strategy implementing :class:`PlatformStrategy`.
Callers hold the strategy and never branch on the OS themselves:

    strategy = create_platform_strategy()
    command = strategy.get_process_list_command("language_server_windows_x64.exe")
    info = strategy.parse_process_info(run(command))
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol

from .config.errors import UnsupportedPlatformError
from .detector_models import ErrorMessages, ListeningPorts, ProcessInfo

logger = logging.getLogger(__name__)

_WINDOWS_PLATFORMS = frozenset({"win32", "cygwin", "windows"})


class PlatformStrategy(Protocol):
    """Minimal contract for an OS-specific detection strategy."""

    def get_process_list_command(self, process_name: str) -> str: ...

    def parse_process_info(self, stdout: str) -> Optional[ProcessInfo]: ...

    def get_port_list_command(self, pid: int) -> str: ...

    def parse_listening_ports(self, stdout: str) -> ListeningPorts: ...

    def get_error_messages(self) -> ErrorMessages: ...


def create_platform_strategy(platform: Optional[str] = None) -> PlatformStrategy:
    """
    Return a fresh detection strategy for ``platform`` (default ``sys.platform``).

    Raises:
        UnsupportedPlatformError: If no strategy exists for the platform
    """
    from .windows_process_detector import WindowsProcessDetector

    target = (platform or sys.platform).lower()
    if target in _WINDOWS_PLATFORMS:
        detector = WindowsProcessDetector.from_settings()
        logger.debug("Using Windows process detector (mode=%s)", detector.mode.value)
        return detector
    raise UnsupportedPlatformError.for_platform(target)


__all__ = ["PlatformStrategy", "create_platform_strategy"]
