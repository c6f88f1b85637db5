"""Services for loading operations and summing input."""

from .operation_service import OperationService
from .summation_service import SummationService

__all__ = ["OperationService", "SummationService"]
