"""
ai-prompts - Curated AI prompt library

Indexes a tree of markdown prompts, workflows and coding standards and
exposes lookup, search and compose operations over them.
"""

from importlib.metadata import PackageNotFoundError, version

from ai_prompts.library import (
    CATEGORIES,
    Category,
    LibraryStats,
    Prompt,
    PromptLibrary,
    SearchResult,
    clear_cache,
    compose_prompts,
    get_library,
    get_prompt,
    get_prompt_content,
    get_stats,
    list_prompts,
    search_prompts,
)

try:
    __version__ = version("ai-prompts")
except PackageNotFoundError:
    __version__ = "1.0.0"

__all__ = [
    "__version__",
    "CATEGORIES",
    "Category",
    "LibraryStats",
    "Prompt",
    "PromptLibrary",
    "SearchResult",
    "clear_cache",
    "compose_prompts",
    "get_library",
    "get_prompt",
    "get_prompt_content",
    "get_stats",
    "list_prompts",
    "search_prompts",
]
