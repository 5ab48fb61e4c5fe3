"""Key-value extractors: plain mappings and Java-style ``.properties`` tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from mtuvalidator.exceptions import ExtractionErrorCode, MtuExtractionError
from mtuvalidator.extractors.base import BaseMtuExtractor, parse_mtu
from mtuvalidator.extractors.factory import register_extractor
from mtuvalidator.models import ExtractorMetadata

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _ends_with_continuation(line: str) -> bool:
    """True if the line ends in an odd number of backslashes."""
    stripped = line.rstrip("\\")
    return (len(line) - len(stripped)) % 2 == 1


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 >= len(text):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u" and i + 6 <= len(text):
            try:
                out.append(chr(int(text[i + 2 : i + 6], 16)))
                i += 6
                continue
            except ValueError:
                pass
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split_key_value(line: str) -> tuple[str, str]:
    """Split a logical properties line at the first unescaped separator."""
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "=:" or ch.isspace():
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java ``.properties`` text into a dict.

    Supports ``#``/``!`` comments, ``=``, ``:`` and whitespace separators,
    backslash line continuations and the usual escapes. Later keys override
    earlier ones.
    """
    props: dict[str, str] = {}
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip(" \t\f")
        if not pending and (not line or line[0] in "#!"):
            continue
        if _ends_with_continuation(line):
            pending += line[:-1]
            continue
        logical = pending + line
        pending = ""
        if logical:
            key, value = _split_key_value(logical)
            props[key] = value
    if pending:
        key, value = _split_key_value(pending)
        props[key] = value
    return props


@register_extractor("map")
class MapMtuExtractor(BaseMtuExtractor):
    """Look up the MTU under a key in a string-keyed mapping.

    With ``case_insensitive`` the first key (in the mapping's iteration order)
    that matches case-insensitively wins. For unordered mappings that order,
    and therefore the winner among several matching keys, is arbitrary.
    """

    METADATA = ExtractorMetadata(
        name="MapMtuExtractor",
        description="Extracts MTU from a key-value mapping",
        source_type="Mapping[str, Any]",
    )

    def __init__(self, key: str, case_insensitive: bool = False, default: int | None = None):
        if not key:
            raise ValueError("key must not be empty")
        self._key = key
        self._case_insensitive = case_insensitive
        self._default = default

    @property
    def key(self) -> str:
        return self._key

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def default(self) -> Any:
        return self._default

    def _lookup(self, source: Mapping[str, Any]) -> Any:
        value = source.get(self._key)
        if value is not None or not self._case_insensitive:
            return value
        wanted = self._key.casefold()
        for k, v in source.items():
            if isinstance(k, str) and k.casefold() == wanted:
                return v
        return None

    def _parse_default(self) -> int:
        return parse_mtu(self._default, f"default of key '{self._key}'")

    def extract(self, source: Any) -> int:
        if not isinstance(source, Mapping):
            raise MtuExtractionError(
                ExtractionErrorCode.INVALID_FORMAT,
                f"Expected a mapping, got {type(source).__name__}",
            )
        value = self._lookup(source)
        if value is None:
            if self._default is not None:
                logger.bind(classname=type(self).__name__).debug(
                    f"Key '{self._key}' not found, using default {self._default}"
                )
                return self._parse_default()
            raise MtuExtractionError(
                ExtractionErrorCode.MTU_NOT_FOUND,
                f"MTU value not found for key: {self._key}",
            )
        return parse_mtu(value, f"key '{self._key}'")


@register_extractor("properties")
class PropertiesMtuExtractor(MapMtuExtractor):
    """Look up the MTU in a flat string-to-string property table.

    The source may be a mapping or raw ``.properties`` text. The default, if
    any, is a string and is parsed like a stored value.
    """

    METADATA = ExtractorMetadata(
        name="PropertiesMtuExtractor",
        description="Extracts MTU from Java-style properties",
        source_type="Mapping[str, str] | str",
    )

    def __init__(self, key: str, case_insensitive: bool = False, default: str | None = None):
        super().__init__(key, case_insensitive=case_insensitive, default=None)
        self._default = default

    def extract(self, source: Any) -> int:
        if isinstance(source, str):
            source = parse_properties(source)
        return super().extract(source)
