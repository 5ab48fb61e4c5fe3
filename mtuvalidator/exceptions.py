"""Exception types for MTU extraction and validator construction."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum


class ExtractionErrorCode(str, Enum):
    """Closed set of reasons an MTU extraction can fail."""

    CONFIG_NOT_FOUND = "config-not-found"
    MTU_NOT_FOUND = "mtu-not-found"
    INVALID_FORMAT = "invalid-format"
    INVALID_MTU_FORMAT = "invalid-mtu-format"
    PLATFORM_ERROR = "platform-error"
    TIMEOUT = "timeout"
    INTERFACE_NOT_FOUND = "interface-not-found"


class MtuExtractionError(Exception):
    """Extraction failed; ``code`` classifies the failure."""

    def __init__(self, code: ExtractionErrorCode, message: str, cause: BaseException | None = None):
        self.code = code
        self.message = message
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"MtuExtractionError(code={self.code.value!r}, message={self.message!r})"


class InvalidMtuRangeError(ValueError):
    """Validator configured with an impossible MTU range."""

    def __init__(self, min_mtu: int, max_mtu: int, reason: str = ""):
        self.min_mtu = min_mtu
        self.max_mtu = max_mtu
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid MTU range {min_mtu}-{max_mtu}{detail}")
