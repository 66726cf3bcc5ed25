"""Configuration for the AI prompt library."""

from ai_prompts.config.loader import (
    ConfigurationError,
    clear_config_cache,
    get_config,
    load_config,
)
from ai_prompts.config.schema import Config, LibraryConfig, LoggingConfig, SearchConfig

__all__ = [
    "Config",
    "ConfigurationError",
    "LibraryConfig",
    "LoggingConfig",
    "SearchConfig",
    "clear_config_cache",
    "get_config",
    "load_config",
]
