"""
eventlayout CLI

Command-line interface with subcommands for computing and checking layouts.
"""

import argparse
import sys
from .cli import check, layout


def main():
    parser = argparse.ArgumentParser(
        prog='eventlayout',
        description='eventlayout: Side-by-side layout of overlapping calendar events'
    )
    
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    # Add subcommand parsers
    layout.add_parser(subparsers)
    check.add_parser(subparsers)
    
    # Parse arguments
    args = parser.parse_args()
    
    if not args.command:
        parser.print_help()
        sys.exit(1)
    
    # Execute the appropriate subcommand
    if args.command == 'layout':
        layout.run(args)
    elif args.command == 'check':
        if check.run(args):
            sys.exit(1)


if __name__ == "__main__":
    main()
