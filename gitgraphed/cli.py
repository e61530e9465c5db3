"""gitgraphed prints a user's GitHub contribution calendar as JSON."""

import argparse
import logging
import sys
from datetime import date

import sentry_sdk
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from gitgraphed.core.errors import ContributionFetchError
from gitgraphed.core.observability import configure_logging
from gitgraphed.core.observability import init_sentry
from gitgraphed.services.contribution_service import get_contribution_graph
from gitgraphed.services.contribution_service import parse_int
from gitgraphed.settings import APP_NAME
from gitgraphed.settings import APP_VERSION
from gitgraphed.settings import Settings


USAGE = f"Usage: {APP_NAME} <username> [year]"

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised instead of argparse's own exit on malformed arguments."""


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def resolve_year(raw_year: str | None, today: date | None = None) -> int:
    """Return the requested year, falling back to the current one.

    Absent or unparsable values fall back silently.
    """

    fallback = (today or date.today()).year
    if raw_year is None:
        return fallback
    year = parse_int(raw_year)
    if year is None:
        logger.info("year=%r is not an integer, using %d", raw_year, fallback)
        return fallback
    return year


def resolve_log_level(verbose: int, default: str) -> int | str:
    if verbose == 1:
        return logging.INFO
    if verbose > 1:
        return logging.DEBUG
    return default.upper()


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog=APP_NAME, description=__doc__)
    parser.add_argument("username", nargs="?")
    parser.add_argument("year", nargs="?")
    parser.add_argument("--verbose", "-v", action="count", default=0)
    parser.add_argument(
        "--version", action="version", version="%(prog)s v" + APP_VERSION
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """gitgraphed main function; returns the process exit code."""

    parser = build_parser()
    try:
        args, extra = parser.parse_known_args(argv)
    except UsageError as exc:
        logger.debug("argument error: %s", exc)
        print(USAGE)
        return 1
    if not args.username:
        print(USAGE)
        return 1
    if extra:
        logger.debug("ignoring extra arguments: %s", extra)

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}")
        return 1
    configure_logging(resolve_log_level(args.verbose, settings.log_level))
    init_sentry(settings)

    year = resolve_year(args.year)
    logger.info("username=%s year=%d", args.username, year)

    try:
        graph = get_contribution_graph(args.username, year, settings)
    except ContributionFetchError as exc:
        sentry_sdk.capture_exception(exc)
        print(f"Error fetching contribution data: {exc}")
        return 1

    try:
        sys.stdout.write(graph.to_json() + "\n")
        sys.stdout.flush()
    except (PydanticSerializationError, UnicodeEncodeError, OSError) as exc:
        sentry_sdk.capture_exception(exc)
        print(f"Error encoding JSON: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
