"""Extraction of connection flags embedded in a language-server command line."""

from __future__ import annotations

import re
from typing import Optional

from ..detector_models import MAX_TCP_PORT
from ..parsing_utils import safe_int_parse

# Separator is "=" or whitespace since quoting differs between launchers.
EXTENSION_PORT_PATTERN = re.compile(r"--extension_server_port[=\s]+([0-9]+)")
CSRF_TOKEN_PATTERN = re.compile(r"--csrf_token[=\s]+([a-f0-9\-]+)", re.IGNORECASE)


def extract_extension_port(command_line: str) -> int:
    """Return the ``--extension_server_port`` value, or 0 when the flag is absent or out of range."""
    match = EXTENSION_PORT_PATTERN.search(command_line)
    if match is None:
        return 0
    port = safe_int_parse(match.group(1), otherwise=0)
    if port > MAX_TCP_PORT:
        return 0
    return port


def extract_csrf_token(command_line: str) -> Optional[str]:
    match = CSRF_TOKEN_PATTERN.search(command_line)
    if match is None:
        return None
    return match.group(1)
