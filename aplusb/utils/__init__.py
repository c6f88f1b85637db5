"""Utility modules for reading input and logging."""

from .logging import setup_logging
from .parsing import parse_operand, parse_operands, read_line

__all__ = ["setup_logging", "parse_operand", "parse_operands", "read_line"]
