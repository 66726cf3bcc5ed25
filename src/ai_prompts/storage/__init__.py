"""Storage utilities for the AI prompt library."""

from ai_prompts.storage.paths import (
    get_default_library_root,
    get_global_config_path,
    get_home_dir,
    resolve_library_root,
)

__all__ = [
    "get_default_library_root",
    "get_global_config_path",
    "get_home_dir",
    "resolve_library_root",
]
