"""CLI command modules."""

from ai_prompts.cli.commands import library

__all__ = ["library"]
