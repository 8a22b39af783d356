from __future__ import annotations

"""Settings for the language-server process detector."""


from dataclasses import dataclass
from functools import lru_cache

from ..detector_models import DetectionMode
from .errors import ConfigurationError
from .runtime import env_bool, env_str

DEFAULT_PROCESS_NAME = "language_server_windows_x64.exe"

USE_POWERSHELL_ENV = "LSDETECT_USE_POWERSHELL"
PROCESS_NAME_ENV = "LSDETECT_PROCESS_NAME"


@dataclass(frozen=True)
class DetectorSettings:
    process_name: str
    mode: DetectionMode


def load_detector_settings() -> DetectorSettings:
    """Read detector settings from the environment without caching."""
    process_name = env_str(PROCESS_NAME_ENV, or_value=DEFAULT_PROCESS_NAME)
    if process_name is None or not process_name.strip():
        raise ConfigurationError.missing_value(PROCESS_NAME_ENV)
    if "'" in process_name or '"' in process_name:
        raise ConfigurationError.invalid_value(PROCESS_NAME_ENV, process_name, "Quotes cannot be embedded in the process filter")

    use_powershell = bool(env_bool(USE_POWERSHELL_ENV, or_value=False))
    return DetectorSettings(process_name=process_name, mode=DetectionMode.from_flag(use_powershell))


@lru_cache(maxsize=1)
def get_detector_settings() -> DetectorSettings:
    return load_detector_settings()


__all__ = [
    "DEFAULT_PROCESS_NAME",
    "DetectorSettings",
    "PROCESS_NAME_ENV",
    "USE_POWERSHELL_ENV",
    "get_detector_settings",
    "load_detector_settings",
]
