"""
Prompt library for ai-prompts.

Indexes the markdown documents under a library root (prompts, snippets,
templates, skills, instructions, chains, contexts, examples) and resolves,
searches and composes them.

Usage:
    from ai_prompts.library import PromptLibrary

    library = PromptLibrary("/path/to/library")

    # Resolve by filename, alias or id
    prompt = library.get_prompt("prd-generator")

    # Search within a category
    results = library.search("security", category="skills", limit=5)

    # Combine several prompts
    text = library.compose(["prd-generator", "ultrathink"])
"""

# Models
from ai_prompts.library.models import (
    CATEGORIES,
    DEFAULT_SUBCATEGORY,
    Category,
    LibraryStats,
    Prompt,
    PromptFrontmatter,
    SearchResult,
)

# Parser
from ai_prompts.library.parser import (
    PromptParseError,
    parse_prompt,
    parse_prompt_file,
    parse_yaml_frontmatter,
    title_from_filename,
)

# Scanner
from ai_prompts.library.scanner import is_prompt_file, scan_category

# Index
from ai_prompts.library.index import PromptIndex, build_index, normalize_key

# Manager
from ai_prompts.library.manager import (
    PromptLibrary,
    clear_cache,
    compose_prompts,
    get_library,
    get_prompt,
    get_prompt_content,
    get_stats,
    list_prompts,
    score_prompt,
    search_prompts,
)

__all__ = [
    # Models
    "CATEGORIES",
    "DEFAULT_SUBCATEGORY",
    "Category",
    "LibraryStats",
    "Prompt",
    "PromptFrontmatter",
    "SearchResult",
    # Parser
    "PromptParseError",
    "parse_prompt",
    "parse_prompt_file",
    "parse_yaml_frontmatter",
    "title_from_filename",
    # Scanner
    "is_prompt_file",
    "scan_category",
    # Index
    "PromptIndex",
    "build_index",
    "normalize_key",
    # Manager
    "PromptLibrary",
    "clear_cache",
    "compose_prompts",
    "get_library",
    "get_prompt",
    "get_prompt_content",
    "get_stats",
    "list_prompts",
    "score_prompt",
    "search_prompts",
]
