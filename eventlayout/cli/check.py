"""Check subcommand - verify layout invariants"""

from __future__ import annotations
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..layout import LayoutEngine
from ..validation import LayoutValidator
from .common import add_input_arguments, configure_logging, layout_config_from_args, load_column_events

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add check subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for check subcommand
    """
    parser = subparsers.add_parser(
        'check',
        help='Compute the layout and verify its invariants'
    )
    add_input_arguments(parser)

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> int:
    """
    Execute check subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        Number of invariant violations found
    """
    configure_logging(args)
    logger.info("=== eventlayout: Layout Check ===")

    events = load_column_events(args)
    config = layout_config_from_args(args)
    result = LayoutEngine(config).calculate_layout(events)
    violations = LayoutValidator(config).check(events, result.layouts)

    for violation in violations:
        logger.error(f"[{violation.rule}] {violation.message}")

    if not violations:
        logger.info(f"OK: {result.n_events} events in {result.n_clusters} clusters")

    return len(violations)
