"""Helper modules for runtime configuration."""

from .dotenv_loader import read_dotenv

__all__ = ["read_dotenv"]
