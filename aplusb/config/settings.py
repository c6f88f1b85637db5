"""Application configuration management."""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.enums import InputMode

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Summation settings with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="APLUSB_", case_sensitive=False)

    # Logging
    log_level: LogLevel = Field(default="WARNING", description="Minimum level for diagnostics on stderr")
    json_logs: bool = Field(default=False, description="Render diagnostics as JSON lines")

    # Behavior
    all_lines: bool = Field(default=False, description="Sum every line until end of input")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def input_mode(self) -> InputMode:
        return InputMode.ALL_LINES if self.all_lines else InputMode.SINGLE_LINE


# Global config instance
_config: Optional[Settings] = None


def get_config() -> Settings:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Settings()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None
