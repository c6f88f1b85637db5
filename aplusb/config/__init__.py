"""Configuration module for the summation CLI."""

from .settings import Settings, get_config, reset_config

__all__ = ["Settings", "get_config", "reset_config"]
