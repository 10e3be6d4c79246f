"""
Command-line entry point.

Runs three canned directory queries and prints their results:

    udc            # run the demo queries
    udc test       # run the embedded self-tests instead

The user source is picked by ``UDC_USER_SOURCE`` (``static`` or
``database``).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from sqlalchemy.orm import sessionmaker

from udc import __version__
from udc.config import Settings, settings as default_settings
from udc.core.constants import DEMO_QUERIES, SELF_TEST_COMMAND, UserSourceKind
from udc.core.logging_config import setup_logging
from udc.repositories.users import UserSource, get_user_source
from udc.services.printer import ConsoleSink, LineSink, Printer
from udc.services.users import UserService

logger = logging.getLogger(__name__)

TESTS_DIR = Path(__file__).parent / "tests"


def build_user_source(settings: Settings) -> UserSource:
    """
    Build the configured user source.

    The database source gets its own engine built from ``settings``;
    the table is created and seeded before the source is returned.
    """
    if settings.user_source != UserSourceKind.DATABASE:
        return get_user_source(settings.user_source)

    from udc.database.init_db import initialize_database
    from udc.database.session import create_db_engine, make_session_context

    engine = create_db_engine(settings.database_url, echo=settings.app_debug)
    session_factory = make_session_context(
        sessionmaker(autocommit=False, autoflush=False, bind=engine)
    )
    initialize_database(engine_instance=engine, session_factory=session_factory)
    return get_user_source(settings.user_source, session_factory)


def run_demo(service: UserService, printer: Printer, sink: LineSink, banner: str) -> None:
    """Write the banner, then run and print each demo query."""
    sink.write_line(banner)
    for message, name, job, company in DEMO_QUERIES:
        results = service.find_user(name=name, job=job, company=company)
        printer.print_results(message, results)


def run_self_tests(extra_args: Sequence[str] = ()) -> int:
    """Run the packaged test suite with pytest and return its exit code."""
    try:
        import pytest
    except ImportError:
        print(
            "The self-tests need pytest. Install it with:\n"
            "    pip install 'user-directory-console[test]'",
            file=sys.stderr,
        )
        return 1

    print("Running internal tests...")
    return int(pytest.main([str(TESTS_DIR), "-q", *extra_args]))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="udc",
        description="Filter the user directory and print the demo queries",
    )
    parser.add_argument(
        "command",
        nargs="?",
        type=str.lower,
        choices=[SELF_TEST_COMMAND],
        help="'test' runs the embedded self-tests instead of the demo",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or default_settings

    setup_logging(settings.log_level, settings.log_file)

    if args.command == SELF_TEST_COMMAND:
        return run_self_tests()

    logger.info("Using %s user source", settings.user_source.value)
    service = UserService(build_user_source(settings))
    sink = ConsoleSink()
    printer = Printer(sink)

    run_demo(service, printer, sink, settings.banner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
