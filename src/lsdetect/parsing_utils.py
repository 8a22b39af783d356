"""Common parsing utilities for safe data conversion."""

from __future__ import annotations

import logging
from typing import Any

import orjson

logger = logging.getLogger(__name__)

# Longer digit runs cannot be a pid or port and int() refuses very long strings.
_MAX_INT_DIGITS = 20

DECODE_FAILED: Any = object()
"""Sentinel returned by :func:`safe_orjson_loads` when decoding fails.

JSON ``null`` decodes to ``None``, so ``None`` cannot signal failure.
"""


def safe_orjson_loads(payload: str | bytes, *, otherwise: Any = DECODE_FAILED) -> Any:
    """
    Parse JSON text using orjson without raising on malformed input.

    Args:
        payload: JSON text or bytes to parse
        otherwise: Value returned when ``payload`` is empty or not valid JSON

    Returns:
        Parsed JSON value, or ``otherwise``
    """
    if not payload:
        return otherwise
    try:
        return orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        logger.debug("JSON decode failed: %s", exc)
        return otherwise


def safe_int_parse(value: Any, *, otherwise: int | None = None) -> int | None:
    """
    Convert ``value`` to ``int`` without raising.

    Booleans, floats with a fractional part and non-numeric strings are
    rejected, as are digit strings longer than twenty characters. Integral
    floats and digit strings (surrounding whitespace allowed) are accepted.
    """
    if value is None or isinstance(value, bool):
        return otherwise
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        return otherwise
    if isinstance(value, str):
        stripped = value.strip()
        if len(stripped) <= _MAX_INT_DIGITS and stripped.isascii() and stripped.isdigit():
            return int(stripped)
        return otherwise
    return otherwise


__all__ = ["DECODE_FAILED", "safe_int_parse", "safe_orjson_loads"]
