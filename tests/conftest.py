"""
Pytest configuration and fixtures for ai-prompts tests.
"""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ai_prompts.config import clear_config_cache

PRD_GENERATOR_MD = """---
title: PRD Generator
description: Turn a feature idea into a product requirements document
tags:
  - planning
  - requirements
aliases:
  - prd
  - requirements-doc
---

# PRD Generator

Write a complete PRD for the feature described below.
"""

MASTER_SYSTEM_PROMPT_MD = """---
title: Master System Prompt
description: Baseline system prompt for coding assistants
tags: [system, baseline]
aliases: [system, brain]
---

You are a senior engineer. Think before you code.
"""

ULTRATHINK_MD = """---
title: Ultrathink
description: Ask for deeper reasoning
tags: [reasoning]
---

Take a deep breath and think through every step.
"""

STEP_BY_STEP_MD = """Work through the problem step by step and show your reasoning.
"""

DEEP_DEBUGGER_MD = """---
title: Deep Debugger
description: Systematic debugging of hard failures
tags: [debug, quality]
---

Reproduce the bug, isolate the cause, then fix it.
"""

CODE_REVIEW_SKILL_MD = """---
title: Code Review
description: Review code for correctness and style
tags: [code, review]
---

Review the code below and list every issue.
"""

SECURITY_AUDIT_SKILL_MD = """---
title: Security Audit
description: Audit code for security vulnerabilities
tags: [security, audit]
---

Check the code for injection, auth and secrets issues.
"""

README_MD = """# Prompts

This index page must never be indexed.
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_env(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep user configuration and library paths out of every test."""
    home = temp_dir / ".ai-prompts"
    monkeypatch.setenv("AI_PROMPTS_HOME", str(home))
    monkeypatch.delenv("AI_LIBRARY_PATH", raising=False)
    for key in ("AI_PROMPTS_LIBRARY_ROOT", "AI_PROMPTS_SEARCH_DEFAULT_LIMIT", "AI_PROMPTS_LOGGING_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def write_prompt(temp_dir: Path) -> Callable[[str, str], Path]:
    """Provide a helper that writes a file relative to the library root."""
    root = temp_dir / "library"

    def _write(relative_path: str, content: str) -> Path:
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def library_root(temp_dir: Path, write_prompt: Callable[[str, str], Path]) -> Path:
    """Provide a small library tree covering several categories."""
    write_prompt("prompts/planning/prd-generator.md", PRD_GENERATOR_MD)
    write_prompt("prompts/debugging/deep-debugger.md", DEEP_DEBUGGER_MD)
    write_prompt("prompts/_index.md", README_MD)
    write_prompt("snippets/ultrathink.md", ULTRATHINK_MD)
    write_prompt("snippets/step-by-step.md", STEP_BY_STEP_MD)
    write_prompt("instructions/master-system-prompt.md", MASTER_SYSTEM_PROMPT_MD)
    write_prompt("skills/review/code-review.md", CODE_REVIEW_SKILL_MD)
    write_prompt("skills/security/audit/security-audit.md", SECURITY_AUDIT_SKILL_MD)
    write_prompt("skills/review/notes.txt", "not a prompt")
    return temp_dir / "library"


@pytest.fixture
def prd_generator_md() -> str:
    """Provide a prompt file with a full metadata header."""
    return PRD_GENERATOR_MD
