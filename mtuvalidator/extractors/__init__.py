"""MTU extractors for key-value, properties, regex and JSON sources.

Importing this package registers the built-in extractors with the factory.
"""

from mtuvalidator.extractors.base import BaseMtuExtractor, parse_mtu
from mtuvalidator.extractors.factory import create_extractor, extractor_class, list_extractors, register_extractor
from mtuvalidator.extractors.mapping import MapMtuExtractor, PropertiesMtuExtractor, parse_properties
from mtuvalidator.extractors.text import DEFAULT_TEXT_PATTERN, JsonPathMtuExtractor, RegexMtuExtractor

__all__ = [
    "BaseMtuExtractor",
    "parse_mtu",
    "create_extractor",
    "extractor_class",
    "list_extractors",
    "register_extractor",
    "MapMtuExtractor",
    "PropertiesMtuExtractor",
    "parse_properties",
    "RegexMtuExtractor",
    "JsonPathMtuExtractor",
    "DEFAULT_TEXT_PATTERN",
]
