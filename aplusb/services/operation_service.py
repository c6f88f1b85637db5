"""
Operation service for loading and executing operations.
"""

import importlib
import inspect
from pathlib import Path
from typing import Dict, List, Optional

import structlog

from ..operations.base import Operation

logger = structlog.get_logger(__name__)


class OperationService:
    """Service for loading and executing operations."""

    def __init__(self):
        self.operations: Dict[str, Operation] = {}
        self._loaded = False
        self._operations_dir = Path(__file__).parent.parent / "operations"
        self._operations_package = f"{__package__.rpartition('.')[0]}.operations"

    def load_operations(self) -> Dict[str, Operation]:
        """Load all operation plugins."""
        if self._loaded:
            return self.operations

        logger.debug("Loading operations", directory=str(self._operations_dir))

        # Every module except the package marker and the interface is a plugin
        operation_files = sorted(
            f for f in self._operations_dir.glob("*.py")
            if f.name not in ["__init__.py", "base.py"]
        )

        for operation_file in operation_files:
            operation_name = operation_file.stem
            operation_instance = self._load_operation_module(operation_name)
            if operation_instance:
                self.operations[operation_instance.name] = operation_instance
                logger.debug("Loaded operation", operation=operation_instance.name)

        self._loaded = True
        logger.debug("Operations loaded", operations=list(self.operations.keys()))
        return self.operations

    def _load_operation_module(self, module_name: str) -> Optional[Operation]:
        """Import a single operation module and instantiate the operation class."""
        module = importlib.import_module(f"{self._operations_package}.{module_name}")

        operation_class = None
        for _, attr in inspect.getmembers(module, inspect.isclass):
            if issubclass(attr, Operation) and attr is not Operation and not inspect.isabstract(attr):
                operation_class = attr
                break

        if not operation_class:
            logger.warning("No Operation class found", module=module_name)
            return None

        operation_instance = operation_class()

        if operation_instance.name != module_name:
            logger.warning(
                "Operation name mismatch",
                module=module_name,
                operation=operation_instance.name
            )

        return operation_instance

    def get_operation(self, name: str) -> Operation:
        """
        Get operation by name.

        Args:
            name: Operation name

        Returns:
            Operation instance

        Raises:
            KeyError: If operation not found
        """
        if not self._loaded:
            self.load_operations()

        if name not in self.operations:
            raise KeyError(f"Operation '{name}' not found. Available: {list(self.operations.keys())}")

        return self.operations[name]

    def get_operation_names(self) -> List[str]:
        """Get list of all available operation names."""
        if not self._loaded:
            self.load_operations()

        return list(self.operations.keys())

    def execute_operation(self, operation_name: str, a: int, b: int) -> int:
        """
        Execute an operation with given inputs.

        Args:
            operation_name: Name of the operation to execute
            a: First operand
            b: Second operand

        Returns:
            Result of the operation

        Raises:
            KeyError: If operation not found
            SummationError: If inputs or result are out of range
        """
        operation = self.get_operation(operation_name)
        return operation.execute(a, b)
