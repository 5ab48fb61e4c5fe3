"""Pydantic models and enums for MTU validation."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mtuvalidator.exceptions import ExtractionErrorCode

IPV4_MINIMUM_MTU = 68
IPV6_MINIMUM_MTU = 1280
PPPOE_MTU = 1492
ETHERNET_MTU = 1500
JUMBO_FRAME_MTU = 9000
MAX_MTU = 65535


class Protocol(Enum):
    """Network-layer context with its default MTU bounds."""

    IPV4 = (IPV4_MINIMUM_MTU, MAX_MTU, "IPv4")
    IPV6 = (IPV6_MINIMUM_MTU, MAX_MTU, "IPv6")
    ETHERNET = (64, ETHERNET_MTU, "Ethernet")
    PPP = (IPV4_MINIMUM_MTU, ETHERNET_MTU, "PPP")
    ANY = (1, MAX_MTU, "Any")

    @property
    def min_mtu(self) -> int:
        return self.value[0]

    @property
    def max_mtu(self) -> int:
        return self.value[1]

    @property
    def display_name(self) -> str:
        return self.value[2]


class NetworkType(Enum):
    """Classification of an MTU value by exact match against typical values."""

    STANDARD_ETHERNET = (ETHERNET_MTU, "Ethernet")
    JUMBO_FRAME = (JUMBO_FRAME_MTU, "Jumbo Frame")
    IPV6_MINIMUM = (IPV6_MINIMUM_MTU, "IPv6 Minimum")
    PPPOE = (PPPOE_MTU, "PPPoE")
    CUSTOM = (-1, "Custom")

    @property
    def typical_mtu(self) -> int:
        return self.value[0]

    @property
    def display_name(self) -> str:
        return self.value[1]

    @classmethod
    def from_mtu(cls, mtu: int) -> NetworkType:
        """Return the type whose typical MTU equals ``mtu``, else CUSTOM."""
        return _NETWORK_TYPE_BY_MTU.get(mtu, cls.CUSTOM)


_NETWORK_TYPE_BY_MTU: dict[int, NetworkType] = {
    t.typical_mtu: t for t in NetworkType if t is not NetworkType.CUSTOM
}


class ValidationResult(BaseModel):
    """Outcome of a single validation. Never mutated after construction."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    message: str
    mtu_value: int | None = None
    network_type: NetworkType | None = None
    recommendations: tuple[str, ...] = ()
    validator_name: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    error_code: ExtractionErrorCode | None = None


class ExtractorMetadata(BaseModel):
    """Informational descriptor of an extractor implementation."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    version: str = "1.0.0"
    author: str = ""
    source_type: str = "object"
    supports_async: bool = False
    requires_privileges: bool = False
    supported_platforms: list[str] = Field(default_factory=lambda: ["any"])
    properties: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
