#!/usr/bin/env python3
"""
Time by Zones CLI

Prints the current time in a set of world locations on one line, for desktop
widgets (GeekTool and friends).

Usage:
    time-by-zones            # UTC, IAD and SFO
    time-by-zones all        # every configured location
    time-by-zones us         # US locations only
    time-by-zones help
"""

import os
import sys
from pathlib import Path

from timebyzones import __version__
from timebyzones.logging_config import LOG_LEVEL_ENV, level_from_name, setup_logging
from timebyzones.reports import report_for_mode


def usage_text(prog: str | None = None) -> str:
    prog = prog or Path(sys.argv[0]).name or "time-by-zones"
    return (
        "\n"
        f"  Usage {prog} [mode]\n"
        "   help           :Display this help\n"
        "   all            :Display all configured time zones\n"
        "   us             :Display only US timezones\n"
        "   * or {blank}   :Display UTC, IAD and SFO time only\n"
        "\n"
        f"  Version {__version__}\n"
    )


def usage(prog: str | None = None) -> None:
    """Print the usage statement and exit 0."""
    print(usage_text(prog), end="")
    sys.exit(0)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    setup_logging(level_from_name(os.environ.get(LOG_LEVEL_ENV)))

    mode = args[0] if args else "default"
    if mode == "help":
        usage()
    print(report_for_mode(mode))


if __name__ == "__main__":
    main()
