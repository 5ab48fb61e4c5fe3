"""macOS network settings via ``networksetup`` and ``ifconfig``.

Every function here takes an optional ``runner`` (see
:data:`mtuvalidator.platform._util.CommandRunner`) so the parsing and
timeout handling can be exercised without a real macOS host.
"""

from __future__ import annotations

import re
import subprocess
from typing import Any

from loguru import logger

from mtuvalidator.exceptions import ExtractionErrorCode, MtuExtractionError
from mtuvalidator.extractors.base import BaseMtuExtractor
from mtuvalidator.extractors.factory import register_extractor
from mtuvalidator.models import ExtractorMetadata, ValidationResult
from mtuvalidator.platform._util import (
    DEFAULT_TIMEOUT,
    CommandResult,
    CommandRunner,
    _validate_interface_name,
    _validate_service_name,
    run_command,
)

# ifconfig: "en0: flags=8863<UP,...> mtu 1500"
# networksetup: "Active MTU: 1500 (Current Setting: 1500)"
MTU_OUTPUT_PATTERN = re.compile(r"mtu:?\s+(\d+)", re.IGNORECASE)

# "(1) Wi-Fi", "(*) Thunderbolt Bridge" (disabled)
_SERVICE_ORDER_LINE = re.compile(r"^\((\d+|\*)\)\s+(.+)$")

_PROPERTY_FLAGS = {
    "mtu": "-getMTU",
    "dns": "-getdnsservers",
}


def _run(cmd: list[str], timeout: float, runner: CommandRunner | None) -> CommandResult:
    """Run a platform command, classifying timeouts and launch failures."""
    run = runner or run_command
    try:
        return run(cmd, timeout)
    except subprocess.TimeoutExpired as e:
        raise MtuExtractionError(
            ExtractionErrorCode.TIMEOUT,
            f"Timeout waiting for {cmd[0]} command after {timeout}s",
            e,
        ) from e
    except OSError as e:
        raise MtuExtractionError(
            ExtractionErrorCode.PLATFORM_ERROR,
            f"Failed to run {cmd[0]}: {e}",
            e,
        ) from e
    except UnicodeDecodeError as e:
        raise MtuExtractionError(
            ExtractionErrorCode.PLATFORM_ERROR,
            f"Undecodable output from {cmd[0]}: {e}",
            e,
        ) from e


def parse_mtu_output(output: str) -> int | None:
    """Return the first ``mtu <n>`` value in command output, or None."""
    m = MTU_OUTPUT_PATTERN.search(output)
    return int(m.group(1)) if m else None


@register_extractor("macos")
class MacNetworkServiceMtuExtractor(BaseMtuExtractor):
    """Read the MTU of a macOS network service or interface.

    Default mode runs ``networksetup -getMTU <service>``; with ``use_ifconfig``
    the source is an interface name and ``ifconfig <iface>`` is used instead.
    """

    METADATA = ExtractorMetadata(
        name="MacNetworkServiceMtuExtractor",
        description="Extracts MTU from macOS network services using networksetup or ifconfig",
        source_type="str",
        supports_async=True,
        requires_privileges=False,
        supported_platforms=["macOS"],
    )

    def __init__(
        self,
        use_ifconfig: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        runner: CommandRunner | None = None,
    ):
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._use_ifconfig = use_ifconfig
        self._timeout = timeout
        self._runner = runner
        self._log = logger.bind(classname=type(self).__name__)

    @property
    def use_ifconfig(self) -> bool:
        return self._use_ifconfig

    @property
    def timeout(self) -> float:
        return self._timeout

    def extract(self, source: Any) -> int:
        name = source.strip() if isinstance(source, str) else ""
        if self._use_ifconfig:
            if not _validate_interface_name(name):
                raise MtuExtractionError(ExtractionErrorCode.INVALID_FORMAT, f"Invalid interface name: {source!r}")
            return self._from_ifconfig(name)
        if not _validate_service_name(name):
            raise MtuExtractionError(ExtractionErrorCode.INVALID_FORMAT, "Network service name cannot be empty")
        return self._from_networksetup(name)

    def _from_networksetup(self, service: str) -> int:
        result = _run(["networksetup", "-getMTU", service], self._timeout, self._runner)
        if result.returncode != 0:
            raise MtuExtractionError(
                ExtractionErrorCode.PLATFORM_ERROR,
                f"networksetup command failed with exit code: {result.returncode}",
            )
        mtu = parse_mtu_output(result.stdout)
        if mtu is None:
            raise MtuExtractionError(
                ExtractionErrorCode.MTU_NOT_FOUND,
                f"MTU value not found in networksetup output: {result.stdout.strip()}",
            )
        self._log.debug(f"networksetup: {service} -> {mtu}")
        return mtu

    def _from_ifconfig(self, interface: str) -> int:
        result = _run(["ifconfig", interface], self._timeout, self._runner)
        if result.returncode != 0:
            raise MtuExtractionError(
                ExtractionErrorCode.INTERFACE_NOT_FOUND,
                f"Interface not found or ifconfig failed: {interface}",
            )
        mtu = parse_mtu_output(result.stdout)
        if mtu is None:
            raise MtuExtractionError(
                ExtractionErrorCode.MTU_NOT_FOUND,
                f"MTU value not found in ifconfig output for interface: {interface}",
            )
        self._log.debug(f"ifconfig: {interface} -> {mtu}")
        return mtu


def list_network_service_order(
    runner: CommandRunner | None = None, timeout: float = DEFAULT_TIMEOUT
) -> list[str]:
    """Return network service names in priority order.

    Disabled services (listed as ``(*) Name``) are included.

    Raises:
        MtuExtractionError: PLATFORM_ERROR or TIMEOUT.
    """
    result = _run(["networksetup", "-listnetworkserviceorder"], timeout, runner)
    if result.returncode != 0:
        raise MtuExtractionError(
            ExtractionErrorCode.PLATFORM_ERROR,
            f"networksetup command failed with exit code: {result.returncode}",
        )
    services: list[str] = []
    for line in result.stdout.splitlines():
        m = _SERVICE_ORDER_LINE.match(line.strip())
        if m:
            services.append(m.group(2).strip())
    return services


def get_service_property(
    service: str,
    prop: str,
    runner: CommandRunner | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Return the raw ``networksetup`` output for a service property.

    Raises:
        ValueError: Unsupported property.
        MtuExtractionError: Invalid service name, PLATFORM_ERROR or TIMEOUT.
    """
    flag = _PROPERTY_FLAGS.get(prop.lower())
    if flag is None:
        raise ValueError(f"Unsupported property: {prop}. Available: {', '.join(sorted(_PROPERTY_FLAGS))}")
    if not _validate_service_name(service):
        raise MtuExtractionError(ExtractionErrorCode.INVALID_FORMAT, "Network service name cannot be empty")
    result = _run(["networksetup", flag, service.strip()], timeout, runner)
    if result.returncode != 0:
        raise MtuExtractionError(
            ExtractionErrorCode.PLATFORM_ERROR,
            f"networksetup command failed with exit code: {result.returncode}",
        )
    return result.stdout.strip()


def check_service_order(
    expected: list[str],
    runner: CommandRunner | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ValidationResult:
    """Compare the current service order with ``expected``."""
    name = "Service Order Validator"
    try:
        actual = list_network_service_order(runner=runner, timeout=timeout)
    except MtuExtractionError as e:
        return ValidationResult(
            valid=False,
            message=f"Failed to read service order: {e.message}",
            validator_name=name,
            error_code=e.code,
        )
    if actual == expected:
        return ValidationResult(valid=True, message="Network service order matches", validator_name=name)
    return ValidationResult(
        valid=False,
        message=f"Network service order differs: expected {expected}, found {actual}",
        recommendations=["Reorder services in System Settings > Network, or with networksetup -ordernetworkservices"],
        validator_name=name,
    )
