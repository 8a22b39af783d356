"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from lsdetect.config import runtime
from lsdetect.config.detector import PROCESS_NAME_ENV, USE_POWERSHELL_ENV, get_detector_settings


@pytest.fixture(autouse=True)
def isolated_configuration(monkeypatch):
    """Keep tests independent of the developer's environment and .env files."""
    monkeypatch.delenv(PROCESS_NAME_ENV, raising=False)
    monkeypatch.delenv(USE_POWERSHELL_ENV, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    get_detector_settings.cache_clear()
    yield
    runtime._DEFAULT_VALUES = None
    get_detector_settings.cache_clear()


@pytest.fixture
def wmic_output() -> str:
    return (
        "\r\n\r\n"
        "CommandLine=c:\\Users\\dev\\AppData\\Local\\Programs\\Antigravity\\resources\\app\\extensions\\antigravity\\bin\\"
        "language_server_windows_x64.exe --enable_lsp --extension_server_port=57193 "
        "--csrf_token=4f2c9a1e-7b3d-4e8f-9a6c-1d2e3f4a5b6c --random_port\r\n"
        "ProcessId=18244\r\n\r\n\r\n"
    )


@pytest.fixture
def netstat_output() -> str:
    return (
        "  TCP    127.0.0.1:57193        0.0.0.0:0              LISTENING       18244\r\n"
        "  TCP    127.0.0.1:57201        0.0.0.0:0              LISTENING       18244\r\n"
        "  TCP    127.0.0.1:57190        0.0.0.0:0              LISTENING       18244\r\n"
        "  TCP    [::1]:57195            [::]:0                 LISTENING       18244\r\n"
    )
