"""lockdiff - Summarize package changes between two yarn lockfiles

    Returns:
        int: Exit code
"""
import logging
import os
import sys
from types import MappingProxyType

from constants import Constants, ExitCodes, OutputFormats
from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import load_settings
from lockfile import ParsedLock, diff_locks, has_downgrades, parse_lock
from report import export_csv, export_json, export_markdown, render_report
from sources import LockfileReadError, read_git_revision, read_lockfile


def _setup_logging(args):
    """Configure logging based on CLI arguments.

    Args:
        args: Parsed CLI arguments.
    """
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()
    if getattr(args, "LOG_FILE", None):
        file_handler = logging.FileHandler(args.LOG_FILE)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logging.getLogger().addHandler(file_handler)
        logging.info("Logging to file: %s", args.LOG_FILE)


def load_texts(args):
    """Reads the previous and current lockfile texts.

    Args:
        args: Parsed CLI arguments.

    Returns:
        tuple: (previous text, current text)
    """
    try:
        current = read_lockfile(args.CURRENT)
        if args.BASE_REF:
            previous = read_git_revision(args.BASE_REF, args.CURRENT)
        else:
            previous = read_lockfile(args.PREVIOUS)
    except LockfileReadError as e:
        logging.error("%s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    return previous, current


def resolve_format(args):
    """Pick the output format from --format or the --output extension."""
    if getattr(args, "OUTPUT_FORMAT", None):
        return args.OUTPUT_FORMAT
    output = (getattr(args, "OUTPUT", None) or "").lower()
    if output.endswith(".json"):
        return OutputFormats.JSON.value
    if output.endswith(".csv"):
        return OutputFormats.CSV.value
    return OutputFormats.MARKDOWN.value


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    _setup_logging(args)
    settings = load_settings(args)
    logging.info("Arguments parsed.")

    previous_text, current_text = load_texts(args)
    with Timer() as timer:
        previous = parse_lock(previous_text) if previous_text else None
        current = parse_lock(current_text)

    if not current.ok or (previous is not None and not previous.ok):
        logging.warning("Unsupported lockfile format detected, skipping comparison.")
        sys.exit(ExitCodes.SUCCESS.value)
    if previous is None:
        # No previous lockfile at the base revision; everything is new.
        previous = ParsedLock(ok=True, entries=MappingProxyType({}), revision=current.revision)

    changes = diff_locks(previous, current)
    if is_debug_enabled(logger):
        logger.debug(
            "Lockfiles compared",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="main",
                count=len(changes),
                duration_ms=timer.duration_ms(),
            ),
        )
    logging.info("Found %d changed packages.", len(changes))

    fmt = resolve_format(args)
    if args.OUTPUT:
        if fmt == OutputFormats.JSON.value:
            export_json(changes, args.OUTPUT)
        elif fmt == OutputFormats.CSV.value:
            export_csv(changes, args.OUTPUT)
        else:
            export_markdown(changes, args.OUTPUT, settings.plain_statuses,
                            settings.collapsible_threshold)
    if not args.QUIET:
        sys.stdout.write(
            render_report(changes, settings.plain_statuses, settings.collapsible_threshold) + "\n"
        )

    if has_downgrades(changes):
        logging.warning("One or more packages have been downgraded.")
        if settings.fail_on_downgrade:
            logging.error("Downgrades present, exiting with non-zero status code.")
            sys.exit(ExitCodes.EXIT_WARNINGS.value)

    sys.exit(ExitCodes.SUCCESS.value)

if __name__ == "__main__":
    main()
