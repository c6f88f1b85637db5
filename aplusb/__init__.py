"""Read two integers from standard input and print their sum."""

from .config.settings import Settings, get_config
from .services.summation_service import SummationService

__version__ = "1.0.0"

__all__ = ["Settings", "SummationService", "get_config"]
