"""Text extractors: regex capture and dotted JSON paths."""

from __future__ import annotations

import json
import re
from typing import Any

from loguru import logger

from mtuvalidator.exceptions import ExtractionErrorCode, MtuExtractionError
from mtuvalidator.extractors.base import BaseMtuExtractor, parse_mtu
from mtuvalidator.extractors.factory import register_extractor
from mtuvalidator.models import ExtractorMetadata

# Default pattern for free-form config text: "mtu 1500", "mtu=1500", "MTU: 1500"
DEFAULT_TEXT_PATTERN = r"mtu[\s=:]+([0-9]+)"


@register_extractor("regex")
class RegexMtuExtractor(BaseMtuExtractor):
    """Capture the MTU from the first regex match in raw text.

    The pattern is always case-insensitive; ``multiline`` adds ``re.MULTILINE``.
    """

    METADATA = ExtractorMetadata(
        name="RegexMtuExtractor",
        description="Extracts MTU from text using a regular expression",
        source_type="str",
    )

    def __init__(self, pattern: str = DEFAULT_TEXT_PATTERN, group_index: int = 1, multiline: bool = False):
        if group_index < 0:
            raise ValueError(f"group_index must be >= 0, got {group_index}")
        flags = re.IGNORECASE | (re.MULTILINE if multiline else 0)
        try:
            self._regex = re.compile(pattern, flags)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern {pattern!r}: {e}") from e
        self._group_index = group_index
        self._multiline = multiline

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    @property
    def group_index(self) -> int:
        return self._group_index

    @property
    def multiline(self) -> bool:
        return self._multiline

    def extract(self, source: Any) -> int:
        if not isinstance(source, str):
            raise MtuExtractionError(
                ExtractionErrorCode.INVALID_FORMAT,
                f"Expected text, got {type(source).__name__}",
            )
        match = self._regex.search(source)
        if match is None:
            raise MtuExtractionError(
                ExtractionErrorCode.MTU_NOT_FOUND,
                f"No match for pattern: {self._regex.pattern}",
            )
        if self._group_index > (self._regex.groups or 0):
            raise MtuExtractionError(
                ExtractionErrorCode.INVALID_FORMAT,
                f"Group index {self._group_index} out of bounds "
                f"(pattern has {self._regex.groups} groups)",
            )
        captured = match.group(self._group_index)
        if captured is None:
            raise MtuExtractionError(
                ExtractionErrorCode.INVALID_MTU_FORMAT,
                f"Group {self._group_index} did not participate in the match",
            )
        return parse_mtu(captured, f"group {self._group_index}")


@register_extractor("json")
class JsonPathMtuExtractor(BaseMtuExtractor):
    """Navigate a dot-separated path (e.g. ``network.mtu``) into JSON.

    All-digit segments also index into arrays (``interfaces.0.mtu``).
    """

    METADATA = ExtractorMetadata(
        name="JsonPathMtuExtractor",
        description="Extracts MTU from JSON using a dotted path",
        source_type="str | bytes | parsed JSON",
    )

    def __init__(self, path: str = "mtu"):
        segments = path.split(".") if path else []
        if not segments or any(not s for s in segments):
            raise ValueError(f"Invalid JSON path: {path!r}")
        self._path = path
        self._segments = tuple(segments)

    @property
    def path(self) -> str:
        return self._path

    def _load(self, source: Any) -> Any:
        if not isinstance(source, (str, bytes, bytearray)):
            return source
        if not source.strip():
            raise MtuExtractionError(ExtractionErrorCode.INVALID_FORMAT, "Empty JSON configuration")
        try:
            return json.loads(source)
        except json.JSONDecodeError as e:
            raise MtuExtractionError(
                ExtractionErrorCode.INVALID_FORMAT,
                f"Malformed JSON: {e.msg} (line {e.lineno}, column {e.colno})",
                e,
            ) from e
        except (ValueError, RecursionError) as e:
            # integer literals past the int-conversion limit, excessive nesting
            raise MtuExtractionError(ExtractionErrorCode.INVALID_FORMAT, f"Malformed JSON: {e}", e) from e

    def _leaf(self, document: Any) -> Any:
        node = document
        walked: list[str] = []
        for segment in self._segments:
            walked.append(segment)
            if isinstance(node, dict) and segment in node:
                node = node[segment]
            elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
                node = node[int(segment)]
            else:
                raise MtuExtractionError(
                    ExtractionErrorCode.MTU_NOT_FOUND,
                    f"MTU value not found at JSON path: {'.'.join(walked)}",
                )
        return node

    def extract(self, source: Any) -> int:
        leaf = self._leaf(self._load(source))
        logger.bind(classname=type(self).__name__).debug(f"{self._path} -> {leaf!r}")
        if isinstance(leaf, float) and leaf.is_integer():
            return int(leaf)
        if isinstance(leaf, (dict, list)) or leaf is None:
            raise MtuExtractionError(
                ExtractionErrorCode.INVALID_MTU_FORMAT,
                f"Invalid MTU value format at JSON path {self._path}: {json.dumps(leaf)}",
            )
        return parse_mtu(leaf, f"JSON path {self._path}")
