"""Input and arithmetic errors raised while summing operands."""

from typing import Any, Dict, Optional


class SummationError(Exception):
    """Base exception for summation errors."""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        result = {"message": self.message}
        if self.code:
            result["code"] = self.code
        if self.details:
            result["details"] = self.details
        return result


class EndOfInputError(SummationError):
    """Raised when the input stream closes before a line is available."""
    def __init__(self, message: str = "No input line available"):
        super().__init__(message, code="END_OF_INPUT")


class MalformedTokenCountError(SummationError):
    """Raised when a line holds fewer than two tokens."""
    def __init__(self, found: int, expected: int = 2):
        message = f"Expected {expected} tokens, found {found}"
        super().__init__(message, code="MALFORMED_TOKEN_COUNT", details={"found": found, "expected": expected})
        self.found = found
        self.expected = expected


class ParseFailureError(SummationError):
    """Raised when a token is not a valid 32-bit signed integer."""
    def __init__(self, token: str, reason: str):
        message = f"Cannot parse {token!r} as an integer: {reason}"
        super().__init__(message, code="PARSE_FAILURE", details={"token": token})
        self.token = token
        self.reason = reason


class IntegerOverflowError(SummationError):
    """Raised when a result falls outside the 32-bit signed range."""
    def __init__(self, a: int, b: int, operation: str = "sum"):
        message = f"{operation} of {a} and {b} overflows a 32-bit signed integer"
        super().__init__(message, code="INTEGER_OVERFLOW", details={"a": a, "b": b})
        self.a = a
        self.b = b
        self.operation = operation


class InvalidOperandError(SummationError):
    """Raised when an operation receives an operand that is not a 32-bit signed integer."""
    def __init__(self, field: str, value: object, reason: str):
        message = f"Invalid operand {field}={value!r}: {reason}"
        super().__init__(message, code="INVALID_OPERAND", details={"field": field, "value": repr(value)})
        self.field = field
        self.value = value
        self.reason = reason
