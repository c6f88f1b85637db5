"""Reading lines and turning tokens into operands."""

import re
from typing import TextIO, Tuple

from ..exceptions import EndOfInputError, MalformedTokenCountError, ParseFailureError
from ..models.schemas import INT32_MAX, INT32_MIN, InputLine

# Optional sign and ASCII digits; no underscores or non-ASCII digits.
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def read_line(stream: TextIO, number: int = 1) -> InputLine:
    """Read one line from the stream, stripping its line separator."""
    raw = stream.readline()
    if raw == "":
        raise EndOfInputError()
    return InputLine(text=raw.rstrip("\r\n"), number=number)


def parse_operand(token: str) -> int:
    """Parse a token as a signed 32-bit integer."""
    if token == "":
        raise ParseFailureError(token, "empty token")
    if not INTEGER_TOKEN.fullmatch(token):
        raise ParseFailureError(token, "not a decimal integer")

    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ParseFailureError(token, "out of 32-bit signed range")
    return value


def parse_operands(line: InputLine) -> Tuple[int, int]:
    """
    Parse the first two tokens of a line.

    Tokens are consumed left to right: the first token is parsed before the
    token count is checked, so an empty line is a parse failure while a lone
    number is a token count error. Tokens past the second are ignored.

    Raises:
        ParseFailureError: If either token is not a valid operand
        MalformedTokenCountError: If the line holds a single token
    """
    tokens = line.tokens()
    a = parse_operand(tokens[0])
    if len(tokens) < 2:
        raise MalformedTokenCountError(found=len(tokens))
    b = parse_operand(tokens[1])
    return a, b
