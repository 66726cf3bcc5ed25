"""
Prompt library manager.

Provides the main interface for looking up, searching and composing prompts.
"""

import logging
import random
import threading
from pathlib import Path

from ai_prompts.library.index import PromptIndex, build_index, normalize_key
from ai_prompts.library.models import CATEGORIES, Category, LibraryStats, Prompt, SearchResult
from ai_prompts.storage.paths import resolve_library_root

logger = logging.getLogger(__name__)

# Search weights per matched field
TITLE_WEIGHT = 10
DESCRIPTION_WEIGHT = 5
TAG_WEIGHT = 8
ALIAS_WEIGHT = 7
CONTENT_WEIGHT = 2

COMPOSE_SEPARATOR = "\n\n---\n\n"


def score_prompt(prompt: Prompt, query: str) -> int:
    """Score a prompt against an already normalized query.

    Each field contributes its weight once when it contains the query.
    """
    score = 0

    if query in prompt.title.lower():
        score += TITLE_WEIGHT

    if query in prompt.description.lower():
        score += DESCRIPTION_WEIGHT

    if any(query in tag.lower() for tag in prompt.tags):
        score += TAG_WEIGHT

    if any(query in alias.lower() for alias in prompt.aliases):
        score += ALIAS_WEIGHT

    if query in prompt.content.lower():
        score += CONTENT_WEIGHT

    return score


class PromptLibrary:
    """Main interface for working with a prompt library.

    The index is built from disk on first access and reused until
    clear_cache() is called. Each instance owns its own cache.

    Provides methods to:
    - Resolve a prompt by id, alias or name
    - Search prompts by free text
    - List prompts and compute statistics
    - Compose several prompts into one text
    """

    def __init__(self, root: Path | str | None = None):
        """Initialize the library.

        Args:
            root: Library root. Resolved from the environment or the package
                location when omitted.
        """
        self.root = resolve_library_root(root)
        self._index: PromptIndex | None = None
        self._lock = threading.Lock()

    @property
    def index(self) -> PromptIndex:
        """Get the prompt index (lazy loaded)."""
        with self._lock:
            if self._index is None:
                self._index = build_index(self.root)
            return self._index

    def clear_cache(self) -> None:
        """Drop the index so the next access rescans the library."""
        with self._lock:
            self._index = None
        logger.debug("Cleared prompt cache for %s", self.root)

    def get_prompt(self, name_or_id: str) -> Prompt | None:
        """Resolve a prompt by id, alias, filename or partial name.

        Resolution order:
        1. Exact key (id, alias or bare filename)
        2. Key containing ``<category>/<name>`` or ending in ``/<name>``,
           trying categories in their fixed order
        3. Key or title containing the name

        Matching is case-insensitive. When several records match in one step,
        the first in index insertion order wins.

        Args:
            name_or_id: Name, alias or id to resolve.

        Returns:
            The prompt, or None if nothing matches.
        """
        index = self.index
        normalized = normalize_key(name_or_id)

        prompt = index.get(normalized)
        if prompt is not None:
            return prompt

        suffix = f"/{normalized}"
        for category in CATEGORIES:
            with_prefix = f"{category}/{normalized}"
            for key, prompt in index.items():
                if with_prefix in key or key.endswith(suffix):
                    return prompt

        for key, prompt in index.items():
            if normalized in key or normalized in prompt.title.lower():
                return prompt

        return None

    def search(
        self,
        query: str,
        category: Category | None = None,
        limit: int | None = None,
    ) -> list[SearchResult]:
        """Search prompts by query string.

        Args:
            query: Text matched against title, description, tags, aliases
                and content.
            category: Only score prompts in this category.
            limit: Maximum number of results (all matches when None).

        Returns:
            Matching prompts, highest score first. Equal scores keep index
            order.
        """
        normalized = normalize_key(query)
        results: list[SearchResult] = []

        for prompt in self.index.distinct():
            if category and prompt.category != category:
                continue

            score = score_prompt(prompt, normalized)
            if score > 0:
                results.append(SearchResult.from_prompt(prompt, score))

        results.sort(key=lambda r: r.score, reverse=True)

        if limit is not None:
            return results[: max(limit, 0)]
        return results

    def list_prompts(self, category: Category | None = None) -> list[Prompt]:
        """List distinct prompts sorted by id.

        Args:
            category: Only list prompts in this category.
        """
        prompts = [
            prompt
            for prompt in self.index.distinct()
            if not category or prompt.category == category
        ]
        return sorted(prompts, key=lambda p: p.id)

    def get_stats(self) -> LibraryStats:
        """Count distinct prompts in total and per category.

        Every category is present in the breakdown, including empty ones.
        """
        prompts = self.list_prompts()
        by_category = {category: 0 for category in CATEGORIES}

        for prompt in prompts:
            by_category[prompt.category] += 1

        return LibraryStats(total=len(prompts), by_category=by_category)

    def compose(self, names: list[str]) -> str:
        """Combine several prompts into one text.

        Each resolved prompt becomes a ``# Title`` heading followed by its
        content; blocks are separated by a horizontal rule. Names that do not
        resolve are skipped.

        Returns:
            The composed text (empty if no name resolves).
        """
        parts: list[str] = []

        for name in names:
            prompt = self.get_prompt(name)
            if prompt is not None:
                parts.append(f"# {prompt.title}\n\n{prompt.content}")
            else:
                logger.debug("Compose skipped unresolved name %r", name)

        return COMPOSE_SEPARATOR.join(parts)

    def get_content(self, name_or_id: str) -> str | None:
        """Get the markdown body of a prompt, or None if it does not resolve."""
        prompt = self.get_prompt(name_or_id)
        return prompt.content if prompt is not None else None

    def random_prompt(
        self,
        category: Category | None = None,
        rng: random.Random | None = None,
    ) -> Prompt | None:
        """Pick a random prompt, optionally from one category.

        Returns:
            A prompt, or None if there is nothing to pick from.
        """
        prompts = self.list_prompts(category)
        if not prompts:
            return None
        return (rng or random).choice(prompts)


# Singleton instance for convenience
_library: PromptLibrary | None = None
_library_lock = threading.Lock()


def get_library(root: Path | str | None = None) -> PromptLibrary:
    """Get the default library singleton.

    A different explicit root replaces the singleton.

    Args:
        root: Optional library root.

    Returns:
        PromptLibrary instance.
    """
    global _library
    with _library_lock:
        if root is not None:
            resolved = resolve_library_root(root)
            if _library is None or _library.root != resolved:
                _library = PromptLibrary(resolved)
        elif _library is None:
            _library = PromptLibrary()
        return _library


def get_prompt(name_or_id: str) -> Prompt | None:
    """Resolve a prompt from the default library."""
    return get_library().get_prompt(name_or_id)


def search_prompts(
    query: str,
    category: Category | None = None,
    limit: int | None = None,
) -> list[SearchResult]:
    """Search the default library."""
    return get_library().search(query, category=category, limit=limit)


def list_prompts(category: Category | None = None) -> list[Prompt]:
    """List prompts in the default library."""
    return get_library().list_prompts(category)


def get_stats() -> LibraryStats:
    """Get statistics for the default library."""
    return get_library().get_stats()


def compose_prompts(names: list[str]) -> str:
    """Compose prompts from the default library."""
    return get_library().compose(names)


def get_prompt_content(name_or_id: str) -> str | None:
    """Get a prompt body from the default library."""
    return get_library().get_content(name_or_id)


def clear_cache() -> None:
    """Clear the default library's cache."""
    get_library().clear_cache()
