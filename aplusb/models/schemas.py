"""Data classes and schemas for summation inputs and results."""

from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class Operands(BaseModel):
    """Two operands, each a signed 32-bit integer."""
    model_config = ConfigDict(strict=True)

    a: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="First operand")
    b: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Second operand")


@dataclass
class InputLine:
    """One line of input with its line separator removed."""
    text: str
    number: int = 1

    def tokens(self) -> List[str]:
        """Trim surrounding whitespace and split on the space character."""
        return self.text.strip().split(" ")

    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass
class SummationResult:
    """Outcome of summing a single input line."""
    line_number: int
    a: int
    b: int
    result: int

    def render(self) -> str:
        return f"{self.result}\n"
