"""Parse netstat output into the loopback ports a process listens on."""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..detector_models import MAX_TCP_PORT, ListeningPorts
from ..parsing_utils import safe_int_parse

logger = logging.getLogger(__name__)

# TCP    127.0.0.1:2873         0.0.0.0:0              LISTENING       4412
_LISTENING_PATTERN = re.compile(r"127\.0\.0\.1:([0-9]+)\s+0\.0\.0\.0:0\s+LISTENING(?:[ \t]+([0-9]+))?")


def parse_listening_ports(stdout: str, *, pid: Optional[int] = None) -> ListeningPorts:
    """
    Return the distinct loopback LISTENING ports in ``stdout``, ascending.

    ``findstr "<pid>"`` matches substrings, so the netstat output may also
    hold sockets of processes whose pid merely contains the same digits.
    Passing ``pid`` keeps only lines whose owning-pid column equals it.
    """
    if not stdout:
        return []

    ports = set()
    for match in _LISTENING_PATTERN.finditer(stdout):
        if pid is not None and match.group(2) != str(pid):
            continue
        port = safe_int_parse(match.group(1), otherwise=0)
        if 0 < port <= MAX_TCP_PORT:
            ports.add(port)

    logger.debug("Found %d listening loopback ports", len(ports))
    return sorted(ports)
