"""
Prompt file parser for the AI prompt library.

Splits the optional YAML frontmatter from the markdown body and turns a
single file into a Prompt record.
"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ai_prompts.library.models import Category, Prompt, PromptFrontmatter

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class PromptParseError(Exception):
    """Error parsing a prompt file."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (at {path})" if path else ""))


def parse_yaml_frontmatter(
    content: str, path: Path | None = None
) -> tuple[dict[str, Any] | None, str]:
    """Parse YAML frontmatter from a markdown file.

    Frontmatter is delimited by --- at the start and end.

    Args:
        content: The full markdown content.
        path: Optional path for error messages.

    Returns:
        Tuple of (frontmatter dict or None, remaining content). The remaining
        content is the untouched input when there is no frontmatter block.

    Raises:
        PromptParseError: If the block is present but is not a YAML mapping.
    """
    lines = content.split("\n")
    if lines[0].strip() != "---":
        return None, content

    end_index = None

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == "---":
            end_index = i
            break

    if end_index is None:
        return None, content

    frontmatter_text = "\n".join(lines[1:end_index])
    remaining_content = "\n".join(lines[end_index + 1 :])

    try:
        frontmatter = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as e:
        raise PromptParseError(f"Invalid YAML frontmatter: {e}", path) from e

    if frontmatter is None:
        return {}, remaining_content

    if not isinstance(frontmatter, dict):
        raise PromptParseError("Frontmatter must be a YAML mapping", path)

    return frontmatter, remaining_content


def title_from_filename(filename: str) -> str:
    """Derive a display title from a bare filename.

    Dashes become spaces and every word is capitalized,
    e.g. ``prd-generator`` -> ``Prd Generator``.
    """
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), filename.replace("-", " "))


def parse_prompt(
    content: str,
    file_path: Path,
    category: Category,
    subcategory: str,
) -> Prompt:
    """Build a Prompt record from file content.

    Args:
        content: The full markdown content.
        file_path: Source file (used for the id and provenance).
        category: Category the file was found under.
        subcategory: Subcategory the file was found under.

    Returns:
        The parsed Prompt.

    Raises:
        PromptParseError: If the frontmatter cannot be parsed.
    """
    frontmatter_dict, body = parse_yaml_frontmatter(content, file_path)
    # YAML 1.1 turns keys like `on` or `1` into non-strings; none are recognized.
    fields = {key: value for key, value in (frontmatter_dict or {}).items() if isinstance(key, str)}

    try:
        frontmatter = PromptFrontmatter.model_validate(fields)
    except ValidationError as e:
        raise PromptParseError(f"Invalid frontmatter: {e}", file_path) from e

    filename = file_path.stem

    return Prompt(
        id=f"{category}/{subcategory}/{filename}",
        title=frontmatter.title or title_from_filename(filename),
        description=frontmatter.description,
        tags=frontmatter.tags,
        aliases=frontmatter.aliases,
        category=category,
        subcategory=subcategory,
        content=body.strip(),
        file_path=file_path,
    )


def parse_prompt_file(file_path: Path, category: Category, subcategory: str) -> Prompt | None:
    """Parse a prompt file, returning None if it cannot be read or parsed.

    A single bad file must never abort a full scan, so every failure is
    reported as a missing record.
    """
    try:
        content = file_path.read_text(encoding="utf-8-sig")
        return parse_prompt(content, file_path, category, subcategory)
    except (OSError, UnicodeDecodeError, PromptParseError) as e:
        logger.debug("Skipping %s: %s", file_path, e)
        return None
