"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError, UnsupportedPlatformError
from .runtime import env_bool, env_str

__all__ = [
    "ConfigurationError",
    "UnsupportedPlatformError",
    "env_bool",
    "env_str",
]
