"""Tests for map and properties extractors."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from mtuvalidator.exceptions import ExtractionErrorCode, MtuExtractionError
from mtuvalidator.extractors.mapping import MapMtuExtractor, PropertiesMtuExtractor, parse_properties


class TestParseProperties:
    """Test the .properties text parser."""

    def test_separators(self):
        props = parse_properties("a=1\nb: 2\nc 3\nd = 4\n")
        assert props == {"a": "1", "b": "2", "c": "3", "d": "4"}

    def test_comments_and_blank_lines(self):
        props = parse_properties("# comment\n! also comment\n\n   \nmtu=1500\n")
        assert props == {"mtu": "1500"}

    def test_line_continuation(self):
        props = parse_properties("mtu = 15\\\n    00\n")
        assert props["mtu"] == "1500"

    def test_escapes(self):
        props = parse_properties("key\\ with\\ space=value\\tx\nuni=\\u0041\n")
        assert props["key with space"] == "value\tx"
        assert props["uni"] == "A"

    def test_later_keys_override(self):
        assert parse_properties("mtu=1500\nmtu=9000\n") == {"mtu": "9000"}

    def test_key_without_value(self):
        assert parse_properties("mtu\n") == {"mtu": ""}


class TestMapMtuExtractor:
    """Test MapMtuExtractor lookup semantics."""

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            MapMtuExtractor("")

    def test_properties(self):
        e = MapMtuExtractor("mtu", case_insensitive=True, default=1500)
        assert e.key == "mtu"
        assert e.case_insensitive is True
        assert e.default == 1500

    def test_int_value(self):
        assert MapMtuExtractor("mtu").extract({"mtu": 1500}) == 1500

    def test_string_value(self):
        assert MapMtuExtractor("mtu").extract({"mtu": " 9000 "}) == 9000

    def test_missing_key(self):
        with pytest.raises(MtuExtractionError) as exc_info:
            MapMtuExtractor("mtu").extract({"other": 1})
        assert exc_info.value.code is ExtractionErrorCode.MTU_NOT_FOUND
        assert exc_info.value.message == "MTU value not found for key: mtu"

    def test_none_value_counts_as_missing(self):
        with pytest.raises(MtuExtractionError) as exc_info:
            MapMtuExtractor("mtu").extract({"mtu": None})
        assert exc_info.value.code is ExtractionErrorCode.MTU_NOT_FOUND

    def test_default_used_when_missing(self):
        assert MapMtuExtractor("mtu", default=1400).extract({}) == 1400

    def test_present_value_beats_default(self):
        assert MapMtuExtractor("mtu", default=1400).extract({"mtu": 1500}) == 1500

    @pytest.mark.parametrize("raw", ["abc", "15.5", "", True, [1500], "0x5dc"])
    def test_invalid_values(self, raw):
        with pytest.raises(MtuExtractionError) as exc_info:
            MapMtuExtractor("mtu").extract({"mtu": raw})
        assert exc_info.value.code is ExtractionErrorCode.INVALID_MTU_FORMAT

    def test_parse_error_keeps_cause(self):
        with pytest.raises(MtuExtractionError) as exc_info:
            MapMtuExtractor("mtu").extract({"mtu": "abc"})
        assert isinstance(exc_info.value.cause, ValueError)

    def test_negative_value_parsed(self):
        """Range checking is the validator's job."""
        assert MapMtuExtractor("mtu").extract({"mtu": "-1"}) == -1

    def test_case_sensitive_by_default(self):
        with pytest.raises(MtuExtractionError):
            MapMtuExtractor("mtu").extract({"MTU": 1500})

    def test_case_insensitive_lookup(self):
        assert MapMtuExtractor("mtu", case_insensitive=True).extract({"MTU": 1500}) == 1500

    def test_case_insensitive_exact_match_first(self):
        src = OrderedDict([("MTU", 9000), ("mtu", 1500)])
        assert MapMtuExtractor("mtu", case_insensitive=True).extract(src) == 1500

    def test_case_insensitive_iteration_order(self):
        src = OrderedDict([("Mtu", 1400), ("MTU", 9000)])
        assert MapMtuExtractor("mtu", case_insensitive=True).extract(src) == 1400

    def test_non_mapping_source(self):
        with pytest.raises(MtuExtractionError) as exc_info:
            MapMtuExtractor("mtu").extract("mtu=1500")
        assert exc_info.value.code is ExtractionErrorCode.INVALID_FORMAT

    def test_try_extract_returns_error(self):
        outcome = MapMtuExtractor("mtu").try_extract({})
        assert isinstance(outcome, MtuExtractionError)
        assert outcome.code is ExtractionErrorCode.MTU_NOT_FOUND

    def test_try_extract_returns_value(self):
        assert MapMtuExtractor("mtu").try_extract({"mtu": "1500"}) == 1500

    def test_metadata(self):
        assert MapMtuExtractor("mtu").metadata.name == "MapMtuExtractor"


class TestPropertiesMtuExtractor:
    """Test PropertiesMtuExtractor."""

    def test_mapping_source(self):
        assert PropertiesMtuExtractor("network.mtu").extract({"network.mtu": "1500"}) == 1500

    def test_text_source(self):
        text = "# interface config\nnetwork.interface=eth0\nnetwork.mtu = 1492\n"
        assert PropertiesMtuExtractor("network.mtu").extract(text) == 1492

    def test_string_default(self):
        assert PropertiesMtuExtractor("mtu", default="1500").extract({}) == 1500

    def test_invalid_default(self):
        with pytest.raises(MtuExtractionError) as exc_info:
            PropertiesMtuExtractor("mtu", default="big").extract({})
        assert exc_info.value.code is ExtractionErrorCode.INVALID_MTU_FORMAT

    def test_case_insensitive_text(self):
        assert PropertiesMtuExtractor("mtu", case_insensitive=True).extract("MTU=9000") == 9000

    def test_missing_key(self):
        with pytest.raises(MtuExtractionError) as exc_info:
            PropertiesMtuExtractor("mtu").extract("other=1\n")
        assert exc_info.value.code is ExtractionErrorCode.MTU_NOT_FOUND
