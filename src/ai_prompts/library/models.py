"""
Prompt models for the AI prompt library.

Defines the records produced by scanning the library tree, the search
result wrapper, and the frontmatter schema recognized in prompt files.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Category = Literal[
    "prompts",
    "snippets",
    "templates",
    "skills",
    "instructions",
    "chains",
    "contexts",
    "examples",
]

# Enumeration order matters: index builds and prefixed lookups walk it in turn.
CATEGORIES: tuple[Category, ...] = (
    "prompts",
    "snippets",
    "templates",
    "skills",
    "instructions",
    "chains",
    "contexts",
    "examples",
)

DEFAULT_SUBCATEGORY = "general"


class PromptFrontmatter(BaseModel):
    """Frontmatter parsed from a prompt file.

    Only the recognized keys are kept; anything else in the header is dropped.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, description="Display title")
    description: str = Field(default="", description="Short description")
    tags: list[str] = Field(default_factory=list, description="Tags for categorization")
    aliases: list[str] = Field(default_factory=list, description="Alternative lookup names")

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("tags", "aliases", mode="before")
    @classmethod
    def _coerce_string_list(cls, value: Any) -> list[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [str(item) for item in value if item is not None]


class Prompt(BaseModel):
    """A single indexed markdown document.

    Records are built once per scan and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier: category/subcategory/filename")
    title: str = Field(..., description="Display title")
    description: str = Field(default="", description="Description from frontmatter")
    tags: tuple[str, ...] = Field(default=(), description="Tags for categorization")
    aliases: tuple[str, ...] = Field(default=(), description="Alternative lookup names")
    category: Category = Field(..., description="Top-level category")
    subcategory: str = Field(default=DEFAULT_SUBCATEGORY, description="First-level subdirectory")
    content: str = Field(default="", description="Markdown body without frontmatter")
    file_path: Path = Field(..., description="Source file")

    @property
    def filename(self) -> str:
        """Get the bare filename without extension."""
        return self.file_path.stem


class SearchResult(Prompt):
    """A prompt paired with its relevance score for one query."""

    score: int = Field(..., ge=0, description="Relevance score (higher is better)")

    @classmethod
    def from_prompt(cls, prompt: Prompt, score: int) -> "SearchResult":
        """Wrap a prompt with a score."""
        return cls(**prompt.model_dump(), score=score)


class LibraryStats(BaseModel):
    """Aggregate counts over the distinct records in the library."""

    total: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
