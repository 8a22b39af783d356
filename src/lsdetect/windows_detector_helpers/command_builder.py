"""Construction of the Windows command lines used for detection."""

from __future__ import annotations

from ..detector_models import DetectionMode

_POWERSHELL_PROCESS_TEMPLATE = (
    'powershell -NoProfile -Command "Get-CimInstance Win32_Process '
    "-Filter \\\"name='{process_name}'\\\" "
    '| Select-Object ProcessId,CommandLine | ConvertTo-Json"'
)
_WMIC_PROCESS_TEMPLATE = "wmic process where \"name='{process_name}'\" get ProcessId,CommandLine /format:list"
_NETSTAT_TEMPLATE = 'netstat -ano | findstr "{pid}" | findstr "LISTENING"'


def build_process_list_command(process_name: str, mode: DetectionMode) -> str:
    """
    Return the command that lists ``ProcessId`` and ``CommandLine`` for ``process_name``.

    The name is inserted verbatim; callers must only pass trusted values.
    STRUCTURED mode produces JSON (an object, or an array for several
    matches), LEGACY mode produces ``key=value`` lines.

    Raises:
        ValueError: If ``process_name`` is empty
    """
    if not process_name or not process_name.strip():
        raise ValueError("process_name must be a non-empty string")
    if mode is DetectionMode.STRUCTURED:
        return _POWERSHELL_PROCESS_TEMPLATE.format(process_name=process_name)
    return _WMIC_PROCESS_TEMPLATE.format(process_name=process_name)


def build_port_list_command(pid: int) -> str:
    """Return the netstat pipeline listing LISTENING sockets whose line mentions ``pid``."""
    if isinstance(pid, bool) or not isinstance(pid, int) or pid <= 0:
        raise ValueError(f"pid must be a positive integer, got {pid!r}")
    return _NETSTAT_TEMPLATE.format(pid=pid)
