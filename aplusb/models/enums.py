"""Enumerations for input modes and exit status."""

from enum import Enum, IntEnum


class InputMode(Enum):
    """How much of the input stream is consumed."""
    SINGLE_LINE = "single_line"
    ALL_LINES = "all_lines"


class ExitCode(IntEnum):
    """Process exit status."""
    SUCCESS = 0
    FAILURE = 1
