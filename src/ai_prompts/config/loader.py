"""
Configuration loader for the AI prompt library.

Loads and merges configuration from multiple sources:
1. Default values
2. Global config (~/.ai-prompts/config.yaml)
3. Environment variables (AI_PROMPTS_*)
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ai_prompts.config.merger import deep_merge, set_nested_value
from ai_prompts.config.schema import Config
from ai_prompts.storage.paths import HOME_ENV, get_global_config_path

ENV_PREFIX = "AI_PROMPTS_"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary (empty if the file does not exist).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Configuration in {path} must be a YAML mapping")
    return content


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    AI_PROMPTS_<SECTION>_<KEY>=<value> sets ``section.key``; the key keeps
    its remaining underscores, so AI_PROMPTS_SEARCH_DEFAULT_LIMIT sets
    ``search.default_limit``.
    """
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key == HOME_ENV:
            continue

        section, _, name = key[len(ENV_PREFIX) :].lower().partition("_")
        if not section or not name:
            continue

        config = set_nested_value(config, f"{section}.{name}", _parse_env_value(value))

    return config


def _parse_env_value(value: str) -> Any:
    """Parse an environment variable value to an int or leave it as a string."""
    if re.match(r"^-?\d+$", value):
        return int(value)
    return value


def load_config(config_path: Path | None = None, skip_env: bool = False) -> Config:
    """
    Load and merge configuration from all sources.

    Args:
        config_path: Config file to load instead of the global one.
        skip_env: Skip environment variable overrides.

    Returns:
        Merged and validated Config object.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict = Config().model_dump()

    path = config_path or get_global_config_path()
    config_dict = deep_merge(config_dict, load_yaml_file(path))

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


# Singleton for cached config
_cached_config: Config | None = None


def get_config(reload: bool = False) -> Config:
    """
    Get the global configuration instance.

    Uses a cached instance. Use reload=True to force refresh.
    """
    global _cached_config

    if _cached_config is None or reload:
        _cached_config = load_config()

    return _cached_config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    global _cached_config
    _cached_config = None
