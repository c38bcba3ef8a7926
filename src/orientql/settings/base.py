import logging
from typing import Any, Dict

from pydantic import Field, ImportString, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuerySettings(BaseSettings):
    """Configuration for the query builder.

    Values are read from ``ORIENTQL_``-prefixed environment variables or a
    local ``.env`` file. Complex values (``commands``) are given as JSON.

    Example:
        ```
        ORIENTQL_LOG_LEVEL=DEBUG
        ORIENTQL_COMMANDS='{"select": "myapp.commands.AuditedSelect"}'
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="ORIENTQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Log level used by setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    commands: Dict[str, ImportString] = Field(
        default_factory=dict,
        description=(
            "Command id overrides merged over the built-in registry. "
            "Each value is an import path ('package.module.Name') to a command factory."
        )
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Invalid log level '{v}'. "
                f"Expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        return level

    def command_overrides(self) -> Dict[str, Any]:
        """Return a copy of the configured command overrides."""
        return dict(self.commands)
