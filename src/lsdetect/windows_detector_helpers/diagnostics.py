"""Fixed error strings shown when the language server cannot be detected."""

from __future__ import annotations

from ..detector_models import DetectionMode, ErrorMessages

PROCESS_NOT_FOUND = "language_server process not found"
HOST_APPLICATION_REQUIREMENT = "Antigravity is running"
SERVER_PROCESS_REQUIREMENT = "language_server_windows_x64.exe process is running"

_COMMAND_NOT_AVAILABLE = {
    DetectionMode.STRUCTURED: "PowerShell command failed; please check system permissions",
    DetectionMode.LEGACY: "wmic/PowerShell command unavailable; please check the system environment",
}
_PERMISSION_REQUIREMENT = {
    DetectionMode.STRUCTURED: "The system has permission to run PowerShell and netstat commands",
    DetectionMode.LEGACY: "The system has permission to run wmic/PowerShell and netstat commands (auto-fallback supported)",
}


def get_error_messages(mode: DetectionMode) -> ErrorMessages:
    return ErrorMessages(
        process_not_found=PROCESS_NOT_FOUND,
        command_not_available=_COMMAND_NOT_AVAILABLE[mode],
        requirements=(
            HOST_APPLICATION_REQUIREMENT,
            SERVER_PROCESS_REQUIREMENT,
            _PERMISSION_REQUIREMENT[mode],
        ),
    )
