"""Command-line interface for sunrise and sunset lookups."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from suntimes.astronomy.calculator import Rises, compute_solar_times
from suntimes.config import get_settings
from suntimes.formatting.clock import format_clock
from suntimes.models.location import Coordinates
from suntimes.models.suntimes import SuntimesOptions
from suntimes.service import suntimes

logger = logging.getLogger(__name__)


def _coordinates(value: str) -> Coordinates:
    try:
        return Coordinates.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"Invalid date: '{value}'. Expected format: YYYY-MM-DD"
        ) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="suntimes",
        description=f"{settings.app_name} - Local sunrise, sunset and daylight duration",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}",
    )
    parser.add_argument(
        "location",
        type=_coordinates,
        help="Location as lat,lon coordinates (e.g., 40.7128,-74.0060; put -- before a negative latitude)",
    )
    parser.add_argument(
        "--date",
        type=_date,
        default=None,
        help="Date as YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--timezone",
        type=float,
        default=None,
        help="UTC offset in hours, e.g. -8 for PST (default: configured or local offset)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON object",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print the precise sun altitude at each computed event",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    settings = get_settings()
    level = "DEBUG" if verbose else settings.effective_log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _print_checks(options: SuntimesOptions) -> None:
    # astropy is slow to import, so only load it on request
    from suntimes.astronomy.ephemeris import check_solar_times

    result = compute_solar_times(
        options.latitude, options.longitude, options.date, options.timezone
    )
    if not isinstance(result, Rises):
        print("Check:    no sunrise or sunset to check")
        return

    for check in check_solar_times(options):
        print(
            f"Check:    {check.event:<10} {check.time:%Y-%m-%d %H:%M:%S} UTC "
            f"altitude {check.altitude_deg:+.2f}°"
        )
    print(f"Noon:     {format_clock(result.solar_noon)}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    options = SuntimesOptions.from_coordinates(
        args.location,
        args.date or date.today(),
        timezone=args.timezone,
    )
    logger.debug(f"Computing suntimes for {args.location} on {options.date}")
    result = suntimes(options)

    if args.json:
        print(result.model_dump_json())
    else:
        print(f"Sunrise:  {result.sunrise}")
        print(f"Sunset:   {result.sunset}")
        print(f"Daytime:  {result.daytime}")

    if args.check:
        _print_checks(options)

    return 0


if __name__ == "__main__":
    sys.exit(main())
