"""CLI entry point for MTU validation.

Commands:
  validate  Validate a literal value, a configuration file or a macOS service
  info      Show MTU standards, supported formats and extractors
  services  List (and optionally check) the macOS network service order

Examples:
  mtuvalidator validate --value 1500
  mtuvalidator validate --value 9000 --min 1500 --max 9000 -o json
  mtuvalidator validate --file config.json --format json --path network.mtu
  mtuvalidator validate --file ifcfg.txt --format regex --pattern 'MTU=(\\d+)'
  mtuvalidator validate --service Wi-Fi
  mtuvalidator validate --service en0 --ifconfig --timeout 5
  mtuvalidator info --extractors
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from mtuvalidator import __version__
from mtuvalidator.config import Settings
from mtuvalidator.exceptions import MtuExtractionError
from mtuvalidator.formatters import extractors_table, format_result, formats_table, standards_table
from mtuvalidator.models import Protocol, ValidationResult
from mtuvalidator.platform.macos import MacNetworkServiceMtuExtractor, check_service_order, list_network_service_order
from mtuvalidator.sources import ConfigFormat, extractor_for_format, load_source
from mtuvalidator.validator import MtuValidator

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _exit_code(result: ValidationResult) -> int:
    if result.valid:
        return EXIT_VALID
    return EXIT_ERROR if result.error_code is not None else EXIT_INVALID


def _print_error(e: Exception, verbose: bool) -> None:
    print(f"Error: {e}", file=sys.stderr)
    if verbose and isinstance(e, MtuExtractionError):
        print(f"  Error Code: {e.code.value}", file=sys.stderr)
        print(f"  Timestamp: {e.timestamp.isoformat()}", file=sys.stderr)


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a value, file or service and print the result."""
    validator = MtuValidator(
        min_mtu=args.min,
        max_mtu=args.max,
        protocol=Protocol[args.protocol],
        strict_mode=args.strict,
        name="CLI Validator",
    )
    logger.debug(f"Using {validator!r}")

    if args.value is not None:
        result = validator.validate(args.value)
    elif args.file is not None:
        content, fmt = load_source(Path(args.file), ConfigFormat(args.format))
        extractor = extractor_for_format(fmt, path=args.path, pattern=args.pattern)
        result = validator.validate_from_source(content, extractor)
    else:
        extractor = MacNetworkServiceMtuExtractor(use_ifconfig=args.ifconfig, timeout=args.timeout)
        result = validator.validate_from_source(args.service, extractor)

    print(format_result(result, args.output, verbose=args.verbose))
    return _exit_code(result)


def cmd_info(args: argparse.Namespace) -> int:
    """Print static reference tables."""
    show_standards = args.standards
    show_formats = args.formats
    if not (show_standards or show_formats or args.extractors):
        show_standards = show_formats = True

    sections: list[str] = []
    if show_standards:
        sections.append(standards_table())
    if show_formats:
        sections.append(formats_table())
    if args.extractors:
        sections.append(extractors_table())
    print("\n\n".join(sections))
    return EXIT_VALID


def cmd_services(args: argparse.Namespace) -> int:
    """List the macOS network service order, or check it against --expect."""
    if args.expect:
        result = check_service_order(args.expect, timeout=args.timeout)
        print(format_result(result, args.output, verbose=args.verbose))
        return _exit_code(result)

    services = list_network_service_order(timeout=args.timeout)
    if not services:
        print("No network services found")
        return EXIT_VALID
    for idx, name in enumerate(services, start=1):
        print(f"{idx:>3d}  {name}")
    return EXIT_VALID


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Build the argument parser; ``settings`` supplies option defaults."""
    settings = settings or Settings()

    parser = argparse.ArgumentParser(
        prog="mtuvalidator",
        description="Validate Maximum Transmission Unit (MTU) values from various sources",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-o",
        "--output",
        choices=["human", "json", "csv"],
        default=settings.output,
        help=f"Output format (default: {settings.output})",
    )
    common.add_argument("--verbose", action="store_true", help="Verbose output and debug logging")
    common.add_argument(
        "--timeout",
        type=float,
        default=settings.timeout,
        help=f"Timeout in seconds for platform commands (default: {settings.timeout:g})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate
    validate = subparsers.add_parser("validate", parents=[common], help="Validate an MTU value")
    source = validate.add_mutually_exclusive_group(required=True)
    source.add_argument("--value", type=int, help="MTU value to validate")
    source.add_argument("-f", "--file", help="Configuration file to read the MTU from")
    source.add_argument("--service", help="macOS network service (or interface with --ifconfig)")
    validate.add_argument(
        "--min", type=int, default=settings.min_mtu, help=f"Minimum allowed MTU (default: {settings.min_mtu})"
    )
    validate.add_argument(
        "--max", type=int, default=settings.max_mtu, help=f"Maximum allowed MTU (default: {settings.max_mtu})"
    )
    validate.add_argument(
        "--protocol",
        type=str.upper,
        choices=[p.name for p in Protocol],
        default=settings.protocol.name,
        help=f"Network protocol (default: {settings.protocol.name})",
    )
    validate.add_argument("--strict", action="store_true", help="Also enforce the protocol's own MTU bounds")
    validate.add_argument(
        "--format",
        choices=[f.value for f in ConfigFormat],
        default=ConfigFormat.AUTO.value,
        help="Configuration file format (default: auto)",
    )
    validate.add_argument(
        "-p", "--path", default="mtu", help="JSON path or properties key of the MTU (default: mtu)"
    )
    validate.add_argument("--pattern", help="Regex with one capture group for --format regex")
    validate.add_argument("--ifconfig", action="store_true", help="Read --service as an interface via ifconfig")

    # info
    info = subparsers.add_parser("info", help="Show MTU standards and supported formats")
    info.add_argument("--standards", action="store_true", help="Show MTU standards")
    info.add_argument("--formats", action="store_true", help="Show supported configuration formats")
    info.add_argument("--extractors", action="store_true", help="Show registered extractors")

    # services
    services = subparsers.add_parser("services", parents=[common], help="macOS network service order")
    services.add_argument("--expect", nargs="+", metavar="NAME", help="Expected service order")

    return parser


def main(args: list[str] | None = None) -> None:
    """Main entry point for the MTU validation CLI."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    parser = build_parser(settings)
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    verbose = getattr(parsed, "verbose", False)
    if verbose:
        logger.enable("mtuvalidator")
    else:
        logger.remove()
        logger.add(sys.stderr, level="WARNING")

    try:
        if parsed.command == "validate":
            code = cmd_validate(parsed)
        elif parsed.command == "info":
            code = cmd_info(parsed)
        else:
            code = cmd_services(parsed)
    except (MtuExtractionError, ValueError) as e:
        _print_error(e, verbose)
        sys.exit(EXIT_ERROR)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)

    sys.exit(code)


if __name__ == "__main__":
    main()
