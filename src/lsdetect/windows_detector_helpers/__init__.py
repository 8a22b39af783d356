"""Helper modules for WindowsProcessDetector."""

from .command_builder import build_port_list_command, build_process_list_command
from .diagnostics import get_error_messages
from .flag_extractor import extract_csrf_token, extract_extension_port
from .port_parser import parse_listening_ports
from .process_info_parser import parse_process_info

__all__ = [
    "build_port_list_command",
    "build_process_list_command",
    "extract_csrf_token",
    "extract_extension_port",
    "get_error_messages",
    "parse_listening_ports",
    "parse_process_info",
]
