"""
Unit tests for CLI commands.
"""

import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ai_prompts import __version__
from ai_prompts.cli.app import app
from ai_prompts.library import manager as manager_module
from ai_prompts.storage.paths import get_global_config_path


@pytest.fixture(autouse=True)
def reset_library(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every command with a fresh default library."""
    monkeypatch.setattr(manager_module, "_library", None)


def invoke(cli_runner: CliRunner, root: Path, *args: str):
    return cli_runner.invoke(app, ["--root", str(root), *args])


def test_version(cli_runner: CliRunner) -> None:
    """Test --version flag."""
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help(cli_runner: CliRunner) -> None:
    """Test --help flag."""
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("get", "search", "list", "compose", "random", "stats"):
        assert command in result.output


def test_get(cli_runner: CliRunner, library_root: Path) -> None:
    """Test get prints metadata and body."""
    result = invoke(cli_runner, library_root, "get", "prd-generator")
    assert result.exit_code == 0
    assert "# PRD Generator" in result.output
    assert "Category: prompts/planning" in result.output
    assert "Write a complete PRD" in result.output


def test_get_raw(cli_runner: CliRunner, library_root: Path) -> None:
    """Test get --raw prints only the body."""
    result = invoke(cli_runner, library_root, "get", "--raw", "brain")
    assert result.exit_code == 0
    assert result.output.strip() == "You are a senior engineer. Think before you code."


def test_get_not_found_suggests(cli_runner: CliRunner, library_root: Path) -> None:
    """Test an unresolved name exits with suggestions."""
    result = invoke(cli_runner, library_root, "get", "audit", "code")
    assert result.exit_code == 1
    assert "not found" in result.output
    assert "Did you mean" in result.output
    assert "skills/security/security-audit" in result.output


def test_search(cli_runner: CliRunner, library_root: Path) -> None:
    """Test search lists matching ids with scores."""
    result = invoke(cli_runner, library_root, "search", "security")
    assert result.exit_code == 0
    assert "skills/security/security-audit" in result.output
    assert "(23)" in result.output


def test_search_id_with_brackets(
    cli_runner: CliRunner, library_root: Path, write_prompt
) -> None:
    """Test ids that look like markup are printed literally."""
    write_prompt("snippets/tips-[draft].md", "Draft tips.")
    result = invoke(cli_runner, library_root, "search", "draft")
    assert result.exit_code == 0
    assert "snippets/general/tips-[draft]" in result.output


def test_search_category(cli_runner: CliRunner, library_root: Path) -> None:
    """Test search honours the category filter."""
    result = invoke(cli_runner, library_root, "search", "code", "--category", "skills")
    assert result.exit_code == 0
    assert "skills/review/code-review" in result.output
    assert "prompts/" not in result.output


def test_search_limit(cli_runner: CliRunner, library_root: Path) -> None:
    """Test search truncates to the limit."""
    result = invoke(cli_runner, library_root, "search", "e", "--limit", "2")
    assert result.exit_code == 0
    assert len(re.findall(r"^\S+/\S+ \(\d+\)$", result.output, re.MULTILINE)) == 2


def test_search_unknown_category(cli_runner: CliRunner, library_root: Path) -> None:
    result = invoke(cli_runner, library_root, "search", "code", "-c", "nope")
    assert result.exit_code == 1
    assert "Unknown category" in result.output


def test_search_no_results(cli_runner: CliRunner, library_root: Path) -> None:
    result = invoke(cli_runner, library_root, "search", "xyznonexistentquery123")
    assert result.exit_code == 0
    assert "No results found" in result.output


def test_list_overview(cli_runner: CliRunner, library_root: Path) -> None:
    """Test list without a category shows every category."""
    result = invoke(cli_runner, library_root, "list")
    assert result.exit_code == 0
    assert "Library Overview" in result.output
    assert "templates" in result.output
    assert "examples" in result.output


def test_list_category(cli_runner: CliRunner, library_root: Path) -> None:
    """Test list groups a category by subcategory."""
    result = invoke(cli_runner, library_root, "list", "skills")
    assert result.exit_code == 0
    assert "SKILLS (2 items)" in result.output
    assert "review/" in result.output
    assert "code-review" in result.output


def test_list_empty_category(cli_runner: CliRunner, library_root: Path) -> None:
    result = invoke(cli_runner, library_root, "list", "templates")
    assert result.exit_code == 0
    assert "No items" in result.output


def test_list_unknown_category(cli_runner: CliRunner, library_root: Path) -> None:
    result = invoke(cli_runner, library_root, "list", "bogus")
    assert result.exit_code == 1
    assert "Unknown category" in result.output


def test_compose(cli_runner: CliRunner, library_root: Path) -> None:
    """Test compose prints resolved prompts and warns about the rest."""
    result = invoke(cli_runner, library_root, "compose", "ultrathink", "nonexistent123")
    assert result.exit_code == 0
    assert "# Ultrathink" in result.output
    assert "Take a deep breath" in result.output
    assert "Could not find: nonexistent123" in result.output


def test_compose_nothing_found(cli_runner: CliRunner, library_root: Path) -> None:
    result = invoke(cli_runner, library_root, "compose", "bogus1", "bogus2")
    assert result.exit_code == 1
    assert "No items found" in result.output


def test_random(cli_runner: CliRunner, library_root: Path) -> None:
    result = invoke(cli_runner, library_root, "random", "snippets")
    assert result.exit_code == 0
    assert "snippets/general/" in result.output


def test_random_empty_category(cli_runner: CliRunner, library_root: Path) -> None:
    result = invoke(cli_runner, library_root, "random", "templates")
    assert result.exit_code == 1
    assert "No items" in result.output


def test_stats(cli_runner: CliRunner, library_root: Path) -> None:
    """Test stats shows totals and every category."""
    result = invoke(cli_runner, library_root, "stats")
    assert result.exit_code == 0
    assert "Total items: 7" in result.output
    assert "instructions" in result.output
    assert "contexts" in result.output


def test_env_library_path(
    cli_runner: CliRunner, library_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test AI_LIBRARY_PATH is used without --root."""
    monkeypatch.setenv("AI_LIBRARY_PATH", str(library_root))
    result = cli_runner.invoke(app, ["stats"])
    assert result.exit_code == 0
    assert "Total items: 7" in result.output


def test_configured_root(cli_runner: CliRunner, library_root: Path) -> None:
    """Test library.root from the global config file is used."""
    path = get_global_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(f"library:\n  root: '{library_root}'\n")

    result = cli_runner.invoke(app, ["stats"])
    assert result.exit_code == 0
    assert "Total items: 7" in result.output


def test_invalid_config(cli_runner: CliRunner, library_root: Path) -> None:
    """Test a broken config file exits with an error."""
    path = get_global_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("search: [unclosed\n")

    result = invoke(cli_runner, library_root, "stats")
    assert result.exit_code == 1
    assert "Invalid YAML" in result.output
