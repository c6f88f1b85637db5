"""
Sum operation plugin - adds two 32-bit integers.
"""

from pydantic import ValidationError

from ..exceptions import IntegerOverflowError, InvalidOperandError
from ..models.schemas import INT32_MAX, INT32_MIN, Operands
from .base import Operation


class SumOperation(Operation):
    """Add two integers together."""

    @property
    def name(self) -> str:
        return "sum"

    @property
    def description(self) -> str:
        return "Add two 32-bit signed integers (a + b)"

    def validate_inputs(self, a: int, b: int) -> None:
        """Validate that both operands are 32-bit signed integers."""
        try:
            Operands(a=a, b=b)
        except ValidationError as e:
            error = e.errors()[0]
            field = error["loc"][0]
            value = a if field == "a" else b
            raise InvalidOperandError(field, value, error["msg"]) from e

    def execute(self, a: int, b: int) -> int:
        """Add two integers, rejecting results outside the 32-bit range."""
        self.validate_inputs(a, b)
        result = a + b
        if not INT32_MIN <= result <= INT32_MAX:
            raise IntegerOverflowError(a, b, operation=self.name)
        return result
