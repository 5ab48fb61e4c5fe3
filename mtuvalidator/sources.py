"""Configuration file loading and format detection."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from loguru import logger

from mtuvalidator.exceptions import ExtractionErrorCode, MtuExtractionError
from mtuvalidator.extractors.base import BaseMtuExtractor
from mtuvalidator.extractors.mapping import PropertiesMtuExtractor
from mtuvalidator.extractors.text import DEFAULT_TEXT_PATTERN, JsonPathMtuExtractor, RegexMtuExtractor


class ConfigFormat(str, Enum):
    AUTO = "auto"
    JSON = "json"
    PROPERTIES = "properties"
    REGEX = "regex"


def read_config_file(path: Path) -> str:
    """Return the text of a configuration file.

    Raises:
        MtuExtractionError: CONFIG_NOT_FOUND if missing or unreadable,
            INVALID_FORMAT if not valid UTF-8.
    """
    if not path.is_file():
        raise MtuExtractionError(ExtractionErrorCode.CONFIG_NOT_FOUND, f"Configuration file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MtuExtractionError(
            ExtractionErrorCode.INVALID_FORMAT, f"Configuration file is not valid UTF-8: {path}", e
        ) from e
    except OSError as e:
        raise MtuExtractionError(
            ExtractionErrorCode.CONFIG_NOT_FOUND, f"Cannot read configuration file {path}: {e.strerror}", e
        ) from e


def detect_format(path: Path, content: str) -> ConfigFormat:
    """Guess the configuration format from the file name, then the content."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        return ConfigFormat.JSON
    if suffix == ".properties":
        return ConfigFormat.PROPERTIES
    stripped = content.strip()
    if stripped.startswith(("{", "[")):
        return ConfigFormat.JSON
    if "=" in content and any("mtu" in line.lower() for line in content.splitlines()):
        return ConfigFormat.PROPERTIES
    return ConfigFormat.REGEX


def extractor_for_format(fmt: ConfigFormat, path: str = "mtu", pattern: str | None = None) -> BaseMtuExtractor:
    """Build the extractor used for a (non-auto) configuration format.

    ``path`` is the dotted JSON path or the properties key; ``pattern``
    overrides the default regex for free-form text.
    """
    if fmt is ConfigFormat.JSON:
        return JsonPathMtuExtractor(path)
    if fmt is ConfigFormat.PROPERTIES:
        return PropertiesMtuExtractor(path)
    if fmt is ConfigFormat.REGEX:
        return RegexMtuExtractor(pattern or DEFAULT_TEXT_PATTERN, group_index=1, multiline=True)
    raise ValueError(f"Cannot build an extractor for format '{fmt.value}'")


def load_source(path: Path, fmt: ConfigFormat = ConfigFormat.AUTO) -> tuple[str, ConfigFormat]:
    """Read ``path`` and resolve AUTO to a concrete format."""
    content = read_config_file(path)
    if fmt is ConfigFormat.AUTO:
        fmt = detect_format(path, content)
        logger.debug(f"Detected format {fmt.value} for {path}")
    return content, fmt
