"""
Path utilities for the AI prompt library.

Provides consistent path resolution for the library root and configuration files.
"""

import os
from pathlib import Path

LIBRARY_PATH_ENV = "AI_LIBRARY_PATH"
HOME_ENV = "AI_PROMPTS_HOME"

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


def get_home_dir() -> Path:
    """
    Get the ai-prompts home directory.

    Resolution order:
    1. AI_PROMPTS_HOME environment variable
    2. Default: ~/.ai-prompts

    Returns:
        Path to the home directory.
    """
    env_home = os.environ.get(HOME_ENV)
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".ai-prompts"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.ai-prompts/config.yaml
    """
    return get_home_dir() / "config.yaml"


def get_default_library_root(package_dir: Path | None = None) -> Path:
    """
    Locate the library root relative to the installed package.

    A development checkout keeps the category directories one level above the
    package directory; an installed layout keeps them two levels up. The
    nearer candidate wins when it contains a ``prompts`` directory.

    Args:
        package_dir: Package directory to resolve from (default: this package).

    Returns:
        Path to the library root.
    """
    package_dir = package_dir or _PACKAGE_DIR
    near = package_dir.parent
    if (near / "prompts").exists():
        return near
    return near.parent


def resolve_library_root(root: Path | str | None = None, configured: Path | str | None = None) -> Path:
    """
    Resolve the library root directory.

    Resolution order:
    1. Explicit root argument
    2. AI_LIBRARY_PATH environment variable
    3. Configured root (library.root)
    4. Location relative to the installed package

    Returns:
        Absolute path to the library root.
    """
    if root:
        return Path(root).expanduser().resolve()

    env_root = os.environ.get(LIBRARY_PATH_ENV)
    if env_root:
        return Path(env_root).expanduser().resolve()

    if configured:
        return Path(configured).expanduser().resolve()

    return get_default_library_root()
