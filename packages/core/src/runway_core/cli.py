"""
Runway command line.

Projects monthly net cash flow from a CSV of recurring and one-time cash
events and prints one line per month with the running total.

Usage:
    runway
    runway --cash-events-file-path data/cash_events.csv --months 24
    runway -v -t 0.25
"""

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

import structlog

from . import __version__
from .config import (
    DEFAULT_CASH_EVENTS_FILE_PATH,
    DEFAULT_MONTHS,
    DEFAULT_TAX_RATE,
    RunwaySettings,
    load_settings,
)
from .exceptions import RunwayError
from .loader import load_cash_events
from .projector import CashFlowProjector
from .report import render_events, render_projection

logger = structlog.get_logger()


def configure_logging(level: str) -> None:
    """Send structured logs to stderr so stdout only carries the report."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runway",
        description="Project monthly net cash flow from recurring and one-time cash events",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next 12 months from the default events file
  runway

  # Two years, custom file, 25% tax on taxable events
  runway -c ~/finances/cash_events.csv -m 24 -t 0.25
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=None,
        help="Echo each parsed cash event before the report",
    )
    parser.add_argument(
        "--cash-events-file-path", "-c",
        type=str,
        default=None,
        help=f"Path to the cash events CSV (default: {DEFAULT_CASH_EVENTS_FILE_PATH})",
    )
    parser.add_argument(
        "--months", "-m",
        type=int,
        default=None,
        help=f"Projection horizon in months (default: {DEFAULT_MONTHS})",
    )
    parser.add_argument(
        "--tax-rate", "-t",
        type=str,
        default=None,
        help=f"Flat tax rate for taxable events, 0.0-1.0 (default: {DEFAULT_TAX_RATE})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(settings: RunwaySettings, today: date) -> list[str]:
    """
    Produce every output line for one run.

    Nothing is printed here, so a failure part way through leaves no
    partial report.
    """
    events = load_cash_events(settings.cash_events_file_path)
    projector = CashFlowProjector(events, settings.tax_rate)
    rows = projector.run(today, settings.months)

    lines = []
    if settings.verbose:
        lines.extend(render_events(events))
    lines.extend(render_projection(rows))
    return lines


def main(argv: Optional[Sequence[str]] = None, today: Optional[date] = None) -> int:
    """Main entry point for the runway command."""
    args = build_parser().parse_args(argv)
    configure_logging("WARNING")

    try:
        settings = load_settings(
            cash_events_file_path=args.cash_events_file_path,
            months=args.months,
            tax_rate=args.tax_rate,
            verbose=args.verbose,
            log_level=args.log_level,
        )
        configure_logging(settings.log_level)
        lines = run(settings, today or date.today())
    except RunwayError as e:
        logger.debug("projection_failed", error=e.message, **e.details)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
