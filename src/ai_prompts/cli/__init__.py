"""Command-line interface for ai-prompts."""
