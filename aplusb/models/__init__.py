"""Models and data structures for summation."""

from .enums import ExitCode, InputMode
from .schemas import INT32_MAX, INT32_MIN, InputLine, Operands, SummationResult

__all__ = [
    "ExitCode",
    "InputMode",
    "INT32_MAX",
    "INT32_MIN",
    "InputLine",
    "Operands",
    "SummationResult"
]
