"""
Base interface for all operations.

All operation plugins must implement the Operation interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class Operation(ABC):
    """Base class for all operations on two integers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the operation name (must match filename without .py)."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Return a human-readable description of the operation."""
        pass

    @abstractmethod
    def execute(self, a: int, b: int) -> int:
        """
        Execute the operation on two integers.

        Args:
            a: First operand
            b: Second operand

        Returns:
            Result of the operation

        Raises:
            InvalidOperandError: If an operand is not a 32-bit signed integer
            IntegerOverflowError: If the result is out of range
        """
        pass

    def validate_inputs(self, a: int, b: int) -> None:
        """
        Validate inputs before execution (override if needed).

        Args:
            a: First operand
            b: Second operand
        """
        pass

    def get_metadata(self) -> Dict[str, Any]:
        """Return operation metadata."""
        return {
            "name": self.name,
            "description": self.description
        }
