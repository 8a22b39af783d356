from __future__ import annotations

"""Exception types for configuration handling."""


class ConfigurationError(RuntimeError):
    """Raised when configuration values are missing or malformed."""

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigurationError":
        """Create error for missing value."""
        msg = f"{param_name} is missing or empty"
        if context:
            msg += f": {context}"
        return cls(msg)

    @classmethod
    def invalid_value(cls, param_name: str, value, reason: str = "") -> "ConfigurationError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg)


class UnsupportedPlatformError(ConfigurationError):
    """Raised when no detection strategy exists for the requested platform."""

    @classmethod
    def for_platform(cls, platform: str) -> "UnsupportedPlatformError":
        return cls(f"No process detection strategy available for platform {platform!r}")


__all__ = ["ConfigurationError", "UnsupportedPlatformError"]
