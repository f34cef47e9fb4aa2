"""Shared options and helpers for subcommands"""

from __future__ import annotations
from dataclasses import replace
from typing import List
from datetime import date, time
import logging
from argparse import ArgumentParser, ArgumentTypeError, Namespace

from ..config import LayoutConfig, WindowConfig
from ..io import read_events
from ..types import CalendarEvent
from ..window import filter_visible_events

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ArgumentTypeError(f"Invalid date (expected YYYY-MM-DD): {value}")


def _parse_time(value: str) -> time:
    try:
        return time.fromisoformat(value)
    except ValueError:
        raise ArgumentTypeError(f"Invalid time (expected HH:MM): {value}")


def add_input_arguments(parser: ArgumentParser) -> None:
    """
    Add input, day window and engine options to a subcommand parser

    Args:
        parser: Subcommand parser
    """
    parser.add_argument('-i', '--input', required=True,
                       help='Events file (TSV or CSV with id, start, end[, title] columns)')

    # Day window
    parser.add_argument('--date', type=_parse_date,
                       help='Only lay out events visible on this day (YYYY-MM-DD)')
    parser.add_argument('--day-start', type=_parse_time, default=time(0, 0),
                       help='Visible window start, used with --date (default: 00:00)')
    parser.add_argument('--day-end', type=_parse_time, default=None,
                       help='Visible window end, used with --date (default: next midnight)')
    parser.add_argument('--timezone', default='UTC',
                       help='Timezone of --date and window times (default: UTC)')

    # Engine
    parser.add_argument('--tie-break', choices=['id', 'input'], default='id',
                       help='Order of events with equal start times (default: id)')
    parser.add_argument('--lenient', action='store_true',
                       help='Skip interval validation and drop duplicate ids instead of failing')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def configure_logging(args: Namespace) -> None:
    """Configure logging as early as possible for a subcommand"""
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )


def layout_config_from_args(args: Namespace) -> LayoutConfig:
    """Build LayoutConfig from parsed options"""
    config = LayoutConfig.lenient() if args.lenient else LayoutConfig.strict()
    return replace(config, tie_break=args.tie_break)


def load_column_events(args: Namespace) -> List[CalendarEvent]:
    """
    Read events and restrict them to the requested day window

    Args:
        args: Parsed command-line arguments

    Returns:
        Events of the day column
    """
    events = read_events(args.input)
    logger.info(f"Loaded {len(events)} events from {args.input}")

    if args.date is not None:
        window = WindowConfig(day_start=args.day_start, day_end=args.day_end,
                              timezone=args.timezone)
        events = filter_visible_events(events, args.date, window)
        logger.info(f"{len(events)} events visible on {args.date}")

    return events
