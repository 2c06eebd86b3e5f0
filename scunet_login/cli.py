"""
Command-line interface for the SCUNET login client.

Provides argument parsing and main execution flow.
"""

import argparse
import getpass
import logging
import sys

from scunet_login.auth.flow import login
from scunet_login.config import DEFAULT_PASSWORD, DEFAULT_SERVICE, DEFAULT_USER
from scunet_login.errors import LoginError, NotOnExpectedNetwork
from scunet_login.logging_setup import log, setup_logging
from scunet_login.types import Service, Success


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Log in to the SCUNET captive portal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Student ID, password and service can also be provided via the\n"
            "SCUNET_STUDENT_ID, SCUNET_PASSWORD and SCUNET_SERVICE env vars.\n"
            "The password may be the 256-hex encrypted form printed by --debug."
        ),
    )
    parser.add_argument(
        "--user", default=DEFAULT_USER,
        help="Student ID (default: $SCUNET_STUDENT_ID)",
    )
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Password or encrypted credential (overrides SCUNET_PASSWORD env var)",
    )
    parser.add_argument(
        "--service", default=DEFAULT_SERVICE,
        help="internet, china_mobile, china_telecom or china_unicom "
             f"(default: {DEFAULT_SERVICE})",
    )
    parser.add_argument(
        "--boot", action="store_true",
        help="Launched at startup: wait for the WLAN and stay quiet off-campus",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write log messages to this file",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    return parser.parse_args(argv)


def _report(outcome) -> None:
    if not isinstance(outcome, Success):
        log.info("You are already logged in to SCUNET")
        return

    log.info("%s, %s", outcome.display_name, outcome.greeting)
    log.info("Logged in to SCUNET (%s)", outcome.service.label)
    if outcome.remaining_hours is not None:
        log.info("Remaining time: %s hours", outcome.remaining_hours)
    log.debug("Encrypted credential: %s", outcome.encrypted_credential)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the login CLI.

    Returns the process exit status: 0 when logged in (or quietly skipped
    off-campus at boot), 1 on any login failure.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    try:
        service = Service.parse(args.service)
    except ValueError as exc:
        log.error("%s", exc)
        return 2

    if not args.user:
        log.error("No student ID given (use --user or SCUNET_STUDENT_ID)")
        return 2
    if not args.password:
        args.password = getpass.getpass("SCUNET password: ")

    try:
        outcome = login(args.user, args.password, service, startup_context=args.boot)
    except NotOnExpectedNetwork as exc:
        if args.boot:
            log.debug("Skipping login at boot: %s", exc)
            return 0
        log.error("Login failed: %s", exc)
        return 1
    except LoginError as exc:
        log.error("Login failed: %s", exc)
        return 1

    _report(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
