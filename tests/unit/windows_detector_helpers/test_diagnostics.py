"""Tests for detection error messages."""

from __future__ import annotations

from lsdetect.detector_models import DetectionMode
from lsdetect.windows_detector_helpers.diagnostics import get_error_messages


def test_structured_mode_messages():
    messages = get_error_messages(DetectionMode.STRUCTURED)

    assert messages.process_not_found == "language_server process not found"
    assert messages.command_not_available == "PowerShell command failed; please check system permissions"
    assert messages.requirements == (
        "Antigravity is running",
        "language_server_windows_x64.exe process is running",
        "The system has permission to run PowerShell and netstat commands",
    )


def test_legacy_mode_messages():
    messages = get_error_messages(DetectionMode.LEGACY)

    assert messages.process_not_found == "language_server process not found"
    assert messages.command_not_available == "wmic/PowerShell command unavailable; please check the system environment"
    assert messages.requirements[-1] == (
        "The system has permission to run wmic/PowerShell and netstat commands (auto-fallback supported)"
    )
    assert len(messages.requirements) == 3


def test_messages_are_deterministic():
    assert get_error_messages(DetectionMode.LEGACY) == get_error_messages(DetectionMode.LEGACY)


def test_to_dict_uses_camel_case_keys():
    payload = get_error_messages(DetectionMode.STRUCTURED).to_dict()

    assert set(payload) == {"processNotFound", "commandNotAvailable", "requirements"}
    assert isinstance(payload["requirements"], list)
