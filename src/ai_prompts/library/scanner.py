"""
Category scanner for the AI prompt library.

Walks one category directory and parses every prompt file beneath it.
"""

import logging
from pathlib import Path

from ai_prompts.library.models import DEFAULT_SUBCATEGORY, Category, Prompt
from ai_prompts.library.parser import MARKDOWN_SUFFIX, parse_prompt_file

logger = logging.getLogger(__name__)


def is_prompt_file(path: Path) -> bool:
    """Check whether a file should be indexed.

    Underscore-prefixed files are reserved for index and readme pages.
    """
    return path.name.endswith(MARKDOWN_SUFFIX) and not path.name.startswith("_")


def scan_category(root: Path, category: Category) -> list[Prompt]:
    """Scan a category directory for prompt files.

    Files directly under the category get the "general" subcategory. Files in
    nested directories take the name of the first-level directory, however
    deep they sit.

    Args:
        root: Library root containing the category directories.
        category: Category to scan.

    Returns:
        List of parsed prompts (empty if the category directory is missing).
    """
    category_path = root / category
    if not category_path.is_dir():
        return []

    prompts: list[Prompt] = []

    def scan_dir(directory: Path, subcategory: str | None) -> None:
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.debug("Cannot read directory %s: %s", directory, e)
            return

        for entry in entries:
            if entry.is_dir():
                scan_dir(entry, subcategory or entry.name)
            elif is_prompt_file(entry):
                prompt = parse_prompt_file(entry, category, subcategory or DEFAULT_SUBCATEGORY)
                if prompt is not None:
                    prompts.append(prompt)

    scan_dir(category_path, None)
    logger.debug("Scanned %s: %d prompt(s)", category_path, len(prompts))
    return prompts
