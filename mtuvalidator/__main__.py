"""``python -m mtuvalidator`` / ``mtuvalidator`` console entry point."""

from __future__ import annotations

import sys

from tabulate import tabulate

from mtuvalidator import __version__, configure_logging
from mtuvalidator import glogger


def _print_startup_banner() -> None:
    startup_rows = [
        ["version", __version__],
        ["python", sys.version.split()[0]],
        ["platform", sys.platform],
    ]

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "mtuvalidator starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    glogger.opt(raw=True).info(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def main() -> None:
    """Configure logging and hand off to the CLI."""
    configure_logging()
    argv = sys.argv[1:]

    if "--verbose" in argv:
        glogger.enable("mtuvalidator")
        _print_startup_banner()

    from mtuvalidator.cli import main as cli_main

    cli_main(argv)


if __name__ == "__main__":
    main()
