"""
In-memory prompt index for the AI prompt library.

Maps every lookup key (id, aliases, bare filename; all lower-cased) to the
record it names. Keys are kept in insertion order, which is the order
lookups walk them in.
"""

import logging
import time
from collections.abc import Iterator
from pathlib import Path

from ai_prompts.library.models import CATEGORIES, Prompt
from ai_prompts.library.scanner import scan_category

logger = logging.getLogger(__name__)


def normalize_key(key: str) -> str:
    """Normalize a lookup key."""
    return key.strip().lower()


class PromptIndex:
    """Lookup table from normalized keys to prompts.

    Several keys may point at the same Prompt object. When two prompts claim
    the same key the later one wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Prompt] = {}

    def add(self, prompt: Prompt) -> None:
        """Register a prompt under its id, aliases and bare filename."""
        self._entries[normalize_key(prompt.id)] = prompt

        for alias in prompt.aliases:
            self._entries[normalize_key(alias)] = prompt

        self._entries[normalize_key(prompt.filename)] = prompt

    def get(self, key: str) -> Prompt | None:
        """Get the prompt registered under an exact key."""
        return self._entries.get(normalize_key(key))

    def items(self) -> Iterator[tuple[str, Prompt]]:
        """Iterate over (key, prompt) pairs in insertion order."""
        return iter(self._entries.items())

    def distinct(self) -> list[Prompt]:
        """List each indexed prompt once, in order of first appearance."""
        seen: set[str] = set()
        prompts: list[Prompt] = []

        for prompt in self._entries.values():
            if prompt.id in seen:
                continue
            seen.add(prompt.id)
            prompts.append(prompt)

        return prompts

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def build_index(root: Path) -> PromptIndex:
    """Scan every category under a library root and index the results.

    Args:
        root: Library root containing the category directories.

    Returns:
        The populated index.
    """
    start = time.perf_counter()
    index = PromptIndex()

    for category in CATEGORIES:
        for prompt in scan_category(root, category):
            index.add(prompt)

    logger.info(
        "Indexed %d prompt(s) from %s in %.2fs",
        len(index.distinct()),
        root,
        time.perf_counter() - start,
    )
    return index
