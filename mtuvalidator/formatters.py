"""Human, JSON and CSV formatters for validation results, plus info tables."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from tabulate import tabulate

from mtuvalidator.extractors.factory import extractor_class, list_extractors
from mtuvalidator.models import ValidationResult

CSV_FIELDS = ["valid", "mtuValue", "message", "networkType", "recommendations", "validator", "timestamp"]


def _network_type_str(result: ValidationResult) -> str:
    return result.network_type.display_name if result.network_type else "unknown"


class HumanFormatter:
    """Format a ValidationResult as a plain-text block."""

    def __init__(self, result: ValidationResult, verbose: bool = False) -> None:
        self.result = result
        self.verbose = verbose

    def format(self) -> str:
        r = self.result
        lines: list[str] = []

        lines.append("=== MTU Validation Result ===")
        lines.append(f"Status: {'✓ VALID' if r.valid else '✗ INVALID'}")
        lines.append(f"MTU Value: {r.mtu_value if r.mtu_value is not None else '-'}")
        lines.append(f"Message: {r.message}")
        if r.network_type is not None:
            lines.append(f"Network Type: {r.network_type.display_name}")

        if r.recommendations:
            lines.append("\nRecommendations:")
            for rec in r.recommendations:
                lines.append(f"  • {rec}")

        if self.verbose:
            lines.append("\nDetails:")
            lines.append(f"  Validator: {r.validator_name}")
            lines.append(f"  Timestamp: {r.timestamp.isoformat()}")
            if r.error_code is not None:
                lines.append(f"  Error Code: {r.error_code.value}")

        return "\n".join(lines)


class JsonFormatter:
    """Format a ValidationResult as a JSON object."""

    def __init__(self, result: ValidationResult, verbose: bool = False) -> None:
        self.result = result
        self.verbose = verbose

    def to_dict(self) -> dict[str, Any]:
        r = self.result
        data: dict[str, Any] = {
            "valid": r.valid,
            "mtuValue": r.mtu_value,
            "message": r.message,
            "networkType": _network_type_str(r),
            "recommendations": list(r.recommendations),
            "validator": r.validator_name,
            "timestamp": r.timestamp.isoformat(),
        }
        if r.error_code is not None:
            data["errorCode"] = r.error_code.value
        return data

    def format(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


class CsvFormatter:
    """Format a ValidationResult as one CSV line, with a header row when verbose."""

    def __init__(self, result: ValidationResult, verbose: bool = False) -> None:
        self.result = result
        self.verbose = verbose

    def format(self) -> str:
        r = self.result
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        if self.verbose:
            writer.writerow(CSV_FIELDS)
        writer.writerow(
            [
                "true" if r.valid else "false",
                "" if r.mtu_value is None else r.mtu_value,
                r.message,
                _network_type_str(r),
                "; ".join(r.recommendations),
                r.validator_name,
                r.timestamp.isoformat(),
            ]
        )
        return buf.getvalue().rstrip("\n")


FORMATTERS: dict[str, type[HumanFormatter] | type[JsonFormatter] | type[CsvFormatter]] = {
    "human": HumanFormatter,
    "json": JsonFormatter,
    "csv": CsvFormatter,
}


def format_result(result: ValidationResult, output: str = "human", verbose: bool = False) -> str:
    """Render ``result`` in the named output format."""
    try:
        formatter_cls = FORMATTERS[output]
    except KeyError:
        raise ValueError(f"Unknown output format '{output}'. Available: {', '.join(FORMATTERS)}") from None
    return formatter_cls(result, verbose=verbose).format()


# ── info tables ───────────────────────────────────────────────────────

_STANDARDS = [
    ["IPv4 Minimum", 68, "RFC 791"],
    ["IPv6 Minimum", 1280, "RFC 8200"],
    ["Ethernet", 1500, "IEEE 802.3"],
    ["PPPoE", 1492, "1500 - 8 byte PPPoE header"],
    ["Jumbo Frames", 9000, "common implementation"],
    ["Theoretical Max", 65535, "16-bit IPv4 total length"],
]

_DETECTION = [
    [1500, "Ethernet"],
    [1492, "PPPoE"],
    [1280, "IPv6 Minimum"],
    [9000, "Jumbo Frame"],
    ["anything else", "Custom"],
]

_FORMATS = [
    ["json", '{"network": {"mtu": 1500}}', '--format json --path "network.mtu"'],
    ["properties", "network.mtu=1500", '--format properties --path "network.mtu"'],
    ["regex", "interface eth0 mtu 1500", "--format regex [--pattern REGEX]"],
    ["direct", "-", "--value 1500"],
    ["macOS service", "networksetup -getMTU Wi-Fi", '--service "Wi-Fi" [--ifconfig]'],
]


def standards_table() -> str:
    """MTU standards and network-type detection tables."""
    lines = ["=== MTU Standards ==="]
    lines.append(tabulate(_STANDARDS, headers=["Standard", "Bytes", "Reference"], tablefmt="simple"))
    lines.append("\n=== Network Type Detection ===")
    lines.append(tabulate(_DETECTION, headers=["MTU", "Network Type"], tablefmt="simple"))
    return "\n".join(lines)


def formats_table() -> str:
    """Supported configuration formats with example input and flags."""
    lines = ["=== Supported Configuration Formats ==="]
    lines.append(tabulate(_FORMATS, headers=["Format", "Example", "Usage"], tablefmt="simple"))
    return "\n".join(lines)


def extractors_table() -> str:
    """Metadata of all registered extractors."""
    rows = []
    for name in list_extractors():
        meta = extractor_class(name).METADATA
        rows.append(
            [
                name,
                meta.name,
                meta.version,
                meta.source_type,
                "yes" if meta.supports_async else "no",
                "yes" if meta.requires_privileges else "no",
                ", ".join(meta.supported_platforms),
            ]
        )
    headers = ["Key", "Extractor", "Version", "Source", "Async", "Privileged", "Platforms"]
    return "=== Extractors ===\n" + tabulate(rows, headers=headers, tablefmt="simple")
