"""Layout subcommand - compute column layouts"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..layout import LayoutEngine
from ..io import write_layouts
from .common import add_input_arguments, configure_logging, layout_config_from_args, load_column_events

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute side-by-side layout of overlapping events'
    )
    add_input_arguments(parser)
    parser.add_argument('-o', '--output', required=True,
                       help='Output TSV file for layouts')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)
    logger.info("=== eventlayout: Column Layout ===")

    events = load_column_events(args)
    engine = LayoutEngine(layout_config_from_args(args))
    result = engine.calculate_layout(events)

    output_file = Path(args.output)
    write_layouts(result, str(output_file))

    logger.info(f"Clusters: {result.n_clusters}, widest cluster: {result.max_columns} columns")
    logger.info(f"Layouts: {output_file}")
