"""CLI main entry point with subcommand structure."""
import argparse
import logging
import sys
from typing import Optional

from osm_build import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='osmbuild',
        description='osmbuild - convert OSM text files into map records',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  osmbuild build map.osm
  osmbuild build map.osm -o map.json
  osmbuild build --bbox 39.95 2.2 39.1 3.15 spain.osm -o mallorca.shp
  osmbuild build --rules layers.json map.osm.gz -o map.csv
  osmbuild rules --json
'''
    )

    # Global options
    parser.add_argument('--version', '-V', action='version',
                        version=f'osmbuild {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress non-error output')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase verbosity')

    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       description='Available commands')

    from osm_build.cli.commands.build import setup_parser as setup_build
    setup_build(subparsers)

    from osm_build.cli.commands.rules import setup_parser as setup_rules
    setup_rules(subparsers)

    return parser


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    """Set up the root logger from the verbosity flags."""
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='[%(asctime)s][%(levelname)s] %(message)s',
        stream=sys.stderr,
    )


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # No command specified - show help
    if not parsed_args.command:
        parser.print_help()
        return 0

    configure_logging(parsed_args.verbose, parsed_args.quiet)

    if parsed_args.command == 'build':
        from osm_build.cli.commands.build import run as cmd_build
        return cmd_build(parsed_args)
    elif parsed_args.command == 'rules':
        from osm_build.cli.commands.rules import run as cmd_rules
        return cmd_rules(parsed_args)

    parser.print_help()
    return 1
