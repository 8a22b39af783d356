"""Detect a running language server and recover its connection parameters.

Applications embedding the detector configure logging once at startup with
:func:`lsdetect.logging_config.setup_logging`; the detector itself only emits
through module loggers.
"""

from .config.errors import ConfigurationError, UnsupportedPlatformError
from .detector_models import DetectionMode, ErrorMessages, ListeningPorts, ProcessInfo
from .platform_detector import PlatformStrategy, create_platform_strategy
from .windows_process_detector import WindowsProcessDetector

__all__ = [
    "ConfigurationError",
    "DetectionMode",
    "ErrorMessages",
    "ListeningPorts",
    "PlatformStrategy",
    "ProcessInfo",
    "UnsupportedPlatformError",
    "WindowsProcessDetector",
    "create_platform_strategy",
]
