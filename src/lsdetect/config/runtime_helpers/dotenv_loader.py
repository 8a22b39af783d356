"""Read ``LSDETECT_*`` defaults from .env-style files."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "
_QUOTES = ("'", '"')


def read_dotenv(path: Path) -> Dict[str, str]:
    """
    Return the assignments in ``path``; a missing file yields ``{}``.

    Later assignments of the same key override earlier ones, matching how a
    shell would source the file.

    Raises:
        ConfigurationError: If the file exists but cannot be read
    """
    if not path.exists():
        return {}
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigurationError(f"Failed to load configuration from {path}") from exc
    return dict(_iter_assignments(text))


def _iter_assignments(text: str) -> Iterator[Tuple[str, str]]:
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.removeprefix(_EXPORT_PREFIX).strip()
        if key:
            yield key, _unquote(value.strip())


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value
