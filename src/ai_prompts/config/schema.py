"""
Pydantic configuration schema for the AI prompt library.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LibraryConfig(BaseModel):
    """Where the prompt library lives."""

    model_config = ConfigDict(extra="allow")

    root: str | None = None


class SearchConfig(BaseModel):
    """Search defaults for the CLI."""

    model_config = ConfigDict(extra="allow")

    default_limit: int = Field(default=10, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class Config(BaseModel):
    """
    Root configuration model.

    Loaded from defaults, the global YAML file and environment variables,
    merged in that order.
    """

    model_config = ConfigDict(extra="allow")

    library: LibraryConfig = Field(default_factory=LibraryConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
