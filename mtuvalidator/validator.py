"""MTU range/protocol validator producing :class:`ValidationResult` objects."""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

from mtuvalidator.exceptions import InvalidMtuRangeError, MtuExtractionError
from mtuvalidator.extractors.base import BaseMtuExtractor
from mtuvalidator.models import (
    ETHERNET_MTU,
    IPV4_MINIMUM_MTU,
    IPV6_MINIMUM_MTU,
    JUMBO_FRAME_MTU,
    MAX_MTU,
    NetworkType,
    Protocol,
    ValidationResult,
)

MtuPredicate = Callable[[int], bool]

EXTRACTION_RECOMMENDATIONS = (
    "Verify the configuration format is correct",
    "Ensure the MTU value is present in the configuration",
    "Check that the MTU value is a valid integer",
)


class MtuValidator:
    """Check MTU values against an inclusive range and an optional predicate.

    Instances are immutable after construction and safe to share between
    threads. In ``strict_mode`` the configured range is narrowed to the
    protocol's own bounds.

    Raises:
        InvalidMtuRangeError: On construction, if either bound is not
            positive, ``min_mtu > max_mtu``, or the strict range is empty.
    """

    def __init__(
        self,
        min_mtu: int = IPV4_MINIMUM_MTU,
        max_mtu: int = JUMBO_FRAME_MTU,
        protocol: Protocol = Protocol.ETHERNET,
        custom_predicate: MtuPredicate | None = None,
        strict_mode: bool = False,
        name: str = "MTU Validator",
    ):
        if min_mtu <= 0 or max_mtu <= 0:
            raise InvalidMtuRangeError(min_mtu, max_mtu, "bounds must be positive")
        if min_mtu > max_mtu:
            raise InvalidMtuRangeError(min_mtu, max_mtu, "minimum exceeds maximum")
        if strict_mode:
            strict_min = max(min_mtu, protocol.min_mtu)
            strict_max = min(max_mtu, protocol.max_mtu)
            if strict_min > strict_max:
                raise InvalidMtuRangeError(
                    min_mtu,
                    max_mtu,
                    f"no overlap with {protocol.display_name} range "
                    f"{protocol.min_mtu}-{protocol.max_mtu} in strict mode",
                )
            min_mtu, max_mtu = strict_min, strict_max

        self._min_mtu = min_mtu
        self._max_mtu = max_mtu
        self._protocol = protocol
        self._custom_predicate = custom_predicate
        self._strict_mode = strict_mode
        self._name = name
        self._log = logger.bind(classname=type(self).__name__)

    # ── presets ───────────────────────────────────────────────────────

    @classmethod
    def for_ethernet(cls) -> MtuValidator:
        return cls(64, ETHERNET_MTU, Protocol.ETHERNET, name="Ethernet MTU Validator")

    @classmethod
    def for_jumbo_frames(cls) -> MtuValidator:
        return cls(ETHERNET_MTU, JUMBO_FRAME_MTU, Protocol.ETHERNET, name="Jumbo Frame MTU Validator")

    @classmethod
    def for_ipv6(cls) -> MtuValidator:
        return cls(IPV6_MINIMUM_MTU, MAX_MTU, Protocol.IPV6, name="IPv6 MTU Validator")

    @classmethod
    def for_protocol(cls, protocol: Protocol) -> MtuValidator:
        """Validator using the protocol's default bounds."""
        return cls(protocol.min_mtu, protocol.max_mtu, protocol, name=f"{protocol.display_name} MTU Validator")

    # ── configuration ─────────────────────────────────────────────────

    @property
    def min_mtu(self) -> int:
        return self._min_mtu

    @property
    def max_mtu(self) -> int:
        return self._max_mtu

    @property
    def protocol(self) -> Protocol:
        return self._protocol

    @property
    def custom_predicate(self) -> MtuPredicate | None:
        return self._custom_predicate

    @property
    def strict_mode(self) -> bool:
        return self._strict_mode

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return (
            f"MtuValidator(name={self._name!r}, range={self._min_mtu}-{self._max_mtu}, "
            f"protocol={self._protocol.name}, strict={self._strict_mode})"
        )

    # ── validation ────────────────────────────────────────────────────

    def is_valid(self, mtu: int) -> bool:
        """True if ``mtu`` is in range and passes the custom predicate, if any."""
        if not self._min_mtu <= mtu <= self._max_mtu:
            return False
        return self._custom_predicate is None or bool(self._custom_predicate(mtu))

    def validate(self, mtu: int) -> ValidationResult:
        """Validate a literal MTU value. Rejection is a normal result, not an error."""
        if self.is_valid(mtu):
            network_type = NetworkType.from_mtu(mtu)
            self._log.debug(f"{self._name}: {mtu} valid ({network_type.display_name})")
            return ValidationResult(
                valid=True,
                message=f"MTU value {mtu} is valid",
                mtu_value=mtu,
                network_type=network_type,
                validator_name=self._name,
            )

        self._log.debug(f"{self._name}: {mtu} outside {self._min_mtu}-{self._max_mtu} or rejected by predicate")
        return ValidationResult(
            valid=False,
            message=f"MTU value {mtu} is invalid (range: {self._min_mtu}-{self._max_mtu})",
            mtu_value=mtu,
            recommendations=[
                f"Use an MTU value between {self._min_mtu} and {self._max_mtu} bytes",
                "Check the network interface configuration",
                f"Verify the MTU requirements of protocol {self._protocol.display_name}",
            ],
            validator_name=self._name,
        )

    def validate_from_source(self, source: Any, extractor: BaseMtuExtractor) -> ValidationResult:
        """Extract an MTU from ``source`` and validate it.

        Extraction failures become ``valid=False`` results carrying the error
        code; they are never raised.
        """
        outcome = extractor.try_extract(source)
        if isinstance(outcome, MtuExtractionError):
            self._log.info(f"{self._name}: extraction failed [{outcome.code.value}] {outcome.message}")
            return ValidationResult(
                valid=False,
                message=f"Failed to validate MTU: {outcome.message}",
                recommendations=EXTRACTION_RECOMMENDATIONS,
                validator_name=self._name,
                error_code=outcome.code,
            )
        return self.validate(outcome)
