"""Command line entry point for the summation program."""

import argparse
import sys
from typing import List, Optional, TextIO, get_args

from .config.settings import LogLevel, get_config
from .exceptions import SummationError
from .models.enums import ExitCode, InputMode
from .services.summation_service import SummationService
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aplusb",
        description="Read two integers from standard input and print their sum"
    )
    parser.add_argument("--all-lines", action="store_true", default=None,
                        help="Sum every line until end of input")
    parser.add_argument("--log-level", choices=get_args(LogLevel),
                        type=str.upper, help="Minimum level for diagnostics on stderr")
    parser.add_argument("--json-logs", action="store_true", default=None,
                        help="Render diagnostics as JSON lines")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    """Run the program and return its exit status."""
    args = build_parser().parse_args(argv)
    config = get_config()

    logger = setup_logging(
        level=args.log_level or config.log_level,
        json_logs=config.json_logs if args.json_logs is None else args.json_logs
    )
    mode = InputMode.ALL_LINES if args.all_lines else config.input_mode

    service = SummationService()
    try:
        if mode is InputMode.ALL_LINES:
            service.run_all(stdin or sys.stdin, stdout or sys.stdout)
        else:
            service.run(stdin or sys.stdin, stdout or sys.stdout)
    except SummationError as e:
        logger.error("Summation failed", mode=mode.value, **e.to_dict())
        return ExitCode.FAILURE

    return ExitCode.SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
