"""Tests for mtuvalidator.models."""

from __future__ import annotations

import pydantic
import pytest

from mtuvalidator.exceptions import ExtractionErrorCode
from mtuvalidator.models import ExtractorMetadata, NetworkType, Protocol, ValidationResult


class TestProtocol:
    """Test Protocol defaults."""

    @pytest.mark.parametrize(
        "protocol,low,high,display",
        [
            (Protocol.IPV4, 68, 65535, "IPv4"),
            (Protocol.IPV6, 1280, 65535, "IPv6"),
            (Protocol.ETHERNET, 64, 1500, "Ethernet"),
            (Protocol.PPP, 68, 1500, "PPP"),
            (Protocol.ANY, 1, 65535, "Any"),
        ],
    )
    def test_ranges(self, protocol, low, high, display):
        assert protocol.min_mtu == low
        assert protocol.max_mtu == high
        assert protocol.display_name == display

    def test_lookup_by_name(self):
        assert Protocol["IPV6"] is Protocol.IPV6


class TestNetworkType:
    """Test exact-match classification."""

    @pytest.mark.parametrize(
        "mtu,expected",
        [
            (1500, NetworkType.STANDARD_ETHERNET),
            (9000, NetworkType.JUMBO_FRAME),
            (1280, NetworkType.IPV6_MINIMUM),
            (1492, NetworkType.PPPOE),
            (1499, NetworkType.CUSTOM),
            (576, NetworkType.CUSTOM),
            (-1, NetworkType.CUSTOM),
        ],
    )
    def test_from_mtu(self, mtu, expected):
        assert NetworkType.from_mtu(mtu) is expected

    def test_display_names(self):
        assert NetworkType.STANDARD_ETHERNET.display_name == "Ethernet"
        assert NetworkType.JUMBO_FRAME.display_name == "Jumbo Frame"
        assert NetworkType.CUSTOM.typical_mtu == -1


class TestValidationResult:
    """Test ValidationResult model."""

    def test_defaults(self):
        r = ValidationResult(valid=True, message="ok")
        assert r.mtu_value is None
        assert r.network_type is None
        assert r.recommendations == ()
        assert r.error_code is None
        assert r.timestamp.tzinfo is not None

    def test_frozen(self):
        """Assignment after construction is rejected."""
        r = ValidationResult(valid=True, message="ok")
        with pytest.raises(pydantic.ValidationError):
            r.valid = False

    def test_recommendations_are_immutable(self):
        """The caller's list is copied into a tuple that cannot be appended to."""
        recs = ["a"]
        r = ValidationResult(valid=False, message="no", recommendations=recs)
        recs.append("b")
        assert r.recommendations == ("a",)
        assert not hasattr(r.recommendations, "append")

    def test_error_code_from_string(self):
        r = ValidationResult(valid=False, message="x", error_code="timeout")
        assert r.error_code is ExtractionErrorCode.TIMEOUT


class TestExtractorMetadata:
    """Test ExtractorMetadata model."""

    def test_defaults(self):
        m = ExtractorMetadata(name="X", description="does x")
        assert m.version == "1.0.0"
        assert m.supports_async is False
        assert m.requires_privileges is False
        assert m.supported_platforms == ["any"]
        assert m.properties == {}

    @pytest.mark.parametrize("field", ["name", "description"])
    def test_blank_required_fields_rejected(self, field):
        kwargs = {"name": "X", "description": "does x"}
        kwargs[field] = "   "
        with pytest.raises(pydantic.ValidationError):
            ExtractorMetadata(**kwargs)
