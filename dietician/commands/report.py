"""Report command - prints the size breakdown of an ELF file."""

import argparse
import json
import logging

from ..core.exceptions import ELFAnalysisError, InputNotFoundError
from ..core.generator import ReportGenerator
from ..utils.formatter import format_report, report_to_dict

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_NOT_FOUND = 1
EXIT_PARSE_FAILURE = 2


def add_report_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Add report options to a parser.

    Args:
        parser: Parser to extend

    Returns:
        The same parser
    """
    parser.add_argument(
        'input',
        nargs='?',
        metavar='INPUT',
        help='Path to the ELF file to analyze (default: this program\'s own executable)'
    )
    parser.add_argument(
        '-v', '--verbose',
        dest='verbosity',
        action='count',
        default=0,
        help='List sections (-v) and their symbols (-vv)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the report as JSON with exact byte counts'
    )
    return parser


def run_report(args: argparse.Namespace) -> int:
    """
    Execute the report command.

    Args:
        args: Parsed command-line arguments; ``args.input`` must already be
            resolved to a path

    Returns:
        Exit code (0 for success, 1 if the input is missing, 2 if it cannot
        be parsed)
    """
    verbosity = getattr(args, 'verbosity', 0)
    logger.info("Analyzing %s", args.input)

    try:
        result = ReportGenerator(args.input).generate()
    except InputNotFoundError as e:
        logger.error("%s", e)
        return EXIT_INPUT_NOT_FOUND
    except ELFAnalysisError as e:
        logger.critical("Fatal: %s", e)
        return EXIT_PARSE_FAILURE

    if getattr(args, 'json', False):
        report = report_to_dict(result.totals, result.sections, verbosity)
        print(json.dumps(report, indent=2))
    else:
        print(format_report(result.totals, result.sections, verbosity))
    return EXIT_OK
