"""Argument parsing functionality for lockdiff."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="lockdiff",
        description=(
            "lockdiff - Summarize package changes between two yarn lockfiles"
        ),
        add_help=True,
    )

    parser.add_argument("CURRENT",
                        help=f"Current lockfile (default: {Constants.DEFAULT_LOCKFILE})",
                        nargs="?",
                        default=Constants.DEFAULT_LOCKFILE)

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("-p", "--previous",
                        dest="PREVIOUS",
                        help="Previous lockfile to compare against",
                        action="store",
                        type=str)
    input_group.add_argument("-b", "--base-ref",
                        dest="BASE_REF",
                        help="Read the previous lockfile from this git revision",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (markdown, JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format. If not specified, inferred from --output extension; defaults to markdown.",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_FORMATS)
    parser.add_argument("--plain-statuses",
                        dest="PLAIN_STATUSES",
                        help="Render statuses as text instead of badge images.",
                        action="store_true",
                        default=None)
    parser.add_argument("--fail-on-downgrade",
                        dest="FAIL_ON_DOWNGRADE",
                        help="Exit with a non-zero status code if any package was downgraded.",
                        action="store_true",
                        default=None)
    parser.add_argument("--collapsible-threshold",
                        dest="COLLAPSIBLE_THRESHOLD",
                        help="Fold the change table when it has more rows than this "
                             f"(default: {Constants.COLLAPSIBLE_THRESHOLD})",
                        action="store",
                        type=int)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help=f"Set the logging level (default: ${Constants.ENV_LOG_LEVEL} or INFO)",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")

    return parser.parse_args(argv)
