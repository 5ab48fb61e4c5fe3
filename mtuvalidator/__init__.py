"""MTU Validation Library.

Extracts MTU values from configuration maps, properties files, free-form
text, JSON documents and macOS network settings, and validates them against
protocol-specific bounds.
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})


# Import extractor modules to trigger registration
import mtuvalidator.extractors  # noqa: F401, E402
import mtuvalidator.platform  # noqa: F401, E402
from mtuvalidator.exceptions import ExtractionErrorCode, InvalidMtuRangeError, MtuExtractionError  # noqa: E402
from mtuvalidator.extractors import (  # noqa: E402
    BaseMtuExtractor,
    JsonPathMtuExtractor,
    MapMtuExtractor,
    PropertiesMtuExtractor,
    RegexMtuExtractor,
    create_extractor,
    list_extractors,
)
from mtuvalidator.models import ExtractorMetadata, NetworkType, Protocol, ValidationResult  # noqa: E402
from mtuvalidator.platform import MacNetworkServiceMtuExtractor  # noqa: E402
from mtuvalidator.validator import MtuValidator  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "MtuValidator",
    "ValidationResult",
    "Protocol",
    "NetworkType",
    "ExtractorMetadata",
    "ExtractionErrorCode",
    "MtuExtractionError",
    "InvalidMtuRangeError",
    "BaseMtuExtractor",
    "MapMtuExtractor",
    "PropertiesMtuExtractor",
    "RegexMtuExtractor",
    "JsonPathMtuExtractor",
    "MacNetworkServiceMtuExtractor",
    "create_extractor",
    "list_extractors",
]
