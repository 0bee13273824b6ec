#!/usr/bin/env python3
"""
Command-line entry point for dietician.

Prints a breakdown of where the bytes of an ELF executable are spent. When no
input is given, the running program's own executable is analyzed.
"""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

from .commands.report import add_report_arguments, run_report
from .utils.log import DEFAULT_LOG_LEVEL, configure_logging


def _package_version() -> str:
    try:
        return version('dietician')
    except PackageNotFoundError:
        return 'unknown'


def default_input_path() -> str:
    """Path of the executable image of the running process."""
    return sys.executable


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog='dietician',
        description='Show how the bytes of an ELF executable are spent',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s target/release/app
  %(prog)s -v target/release/app
  %(prog)s -vv --json build/firmware.elf
        """
    )
    add_report_arguments(parser)
    parser.add_argument(
        '--log-level',
        default=DEFAULT_LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level for diagnostics on stderr (default: %(default)s)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {_package_version()}'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.input is None:
        args.input = default_input_path()

    sys.exit(run_report(args))


if __name__ == '__main__':
    main()
