"""Parse process-lookup output into language-server connection parameters.

Two formats are accepted:

``wmic ... /format:list``::

    CommandLine=...--extension_server_port=1234 --csrf_token=abc123...
    ProcessId=5678

PowerShell ``ConvertTo-Json``, an object or an array of objects::

    {"ProcessId": 5678, "CommandLine": "...--extension_server_port=1234 --csrf_token=abc123..."}

Input that looks like JSON is decoded as JSON whatever the detection mode,
and anything that fails to decode is retried as ``key=value`` text. Parsing
never raises; unusable output yields ``None``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from ..detector_models import MAX_PID, DetectionMode, ProcessInfo
from ..parsing_utils import DECODE_FAILED, safe_int_parse, safe_orjson_loads
from .flag_extractor import extract_csrf_token, extract_extension_port

logger = logging.getLogger(__name__)

_TABULAR_PID_PATTERN = re.compile(r"ProcessId=([0-9]+)")

# Distinguishes "not JSON, try the tabular format" from a JSON result of None.
_FORMAT_MISMATCH: Any = object()


def parse_process_info(stdout: str, mode: DetectionMode) -> Optional[ProcessInfo]:
    if not stdout:
        return None

    stripped = stdout.strip()
    if mode is DetectionMode.STRUCTURED or stripped.startswith(("{", "[")):
        result = _parse_structured(stripped)
        if result is not _FORMAT_MISMATCH:
            return result

    return _parse_tabular(stdout)


def _parse_structured(text: str) -> Any:
    data = safe_orjson_loads(text)
    if data is DECODE_FAILED:
        logger.debug("Process output is not JSON; falling back to key=value parsing")
        return _FORMAT_MISMATCH

    if isinstance(data, list):
        if not data:
            logger.debug("Process lookup returned an empty JSON array")
            return None
        data = data[0]

    if data is None:
        logger.debug("Process output decoded to JSON null; falling back to key=value parsing")
        return _FORMAT_MISMATCH

    if not isinstance(data, dict):
        logger.debug("Unexpected JSON payload type %s", type(data).__name__)
        return None

    command_line = data.get("CommandLine") or ""
    pid = _coerce_pid(data.get("ProcessId"))
    if pid is None:
        logger.debug("JSON process entry has no usable ProcessId")
        return None

    if not isinstance(command_line, str):
        logger.debug("CommandLine is %s, not text; falling back to key=value parsing", type(command_line).__name__)
        return _FORMAT_MISMATCH

    return _build_process_info(pid, command_line)


def _parse_tabular(text: str) -> Optional[ProcessInfo]:
    pid_match = _TABULAR_PID_PATTERN.search(text)
    if pid_match is None:
        logger.debug("No ProcessId found in process output")
        return None

    pid = _coerce_pid(pid_match.group(1))
    if pid is None:
        logger.debug("Ignoring out-of-range ProcessId")
        return None

    return _build_process_info(pid, text)


def _coerce_pid(value: Any) -> Optional[int]:
    if not value:
        return None
    pid = safe_int_parse(value)
    if pid is None or not 0 < pid <= MAX_PID:
        return None
    return pid


def _build_process_info(pid: int, command_line: str) -> Optional[ProcessInfo]:
    csrf_token = extract_csrf_token(command_line)
    if csrf_token is None:
        logger.debug("Process %d has no --csrf_token flag", pid)
        return None

    return ProcessInfo(
        pid=pid,
        extension_port=extract_extension_port(command_line),
        csrf_token=csrf_token,
    )
