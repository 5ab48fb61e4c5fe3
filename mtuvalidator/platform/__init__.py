"""Platform extractors that shell out to OS utilities (macOS only)."""

from mtuvalidator.platform._util import CommandResult, run_command
from mtuvalidator.platform.macos import (
    MacNetworkServiceMtuExtractor,
    check_service_order,
    get_service_property,
    list_network_service_order,
)

__all__ = [
    "CommandResult",
    "run_command",
    "MacNetworkServiceMtuExtractor",
    "check_service_order",
    "get_service_property",
    "list_network_service_order",
]
