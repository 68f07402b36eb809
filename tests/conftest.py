"""Shared fixtures: a small handbook tree laid out like the real one."""

import pytest


BASE_MD = "# Base\n\nAlways be concise.\n"
TYPESCRIPT_MD = "# TypeScript\n\n- Prefer `unknown` over `any`.\n"
PYTHON_MD = "# Python\n\n- Use type hints.\n"
NEXTJS_MD = "# Next.js\n\n- Use the app router.\n"
DOCKER_MD = "# Docker\n\n- Pin base images.\n"
TESTING_MD = "# Testing\n\n- One behavior per test.\n"
CODE_REVIEW_MD = "# Code Review Agent\n\nReview diffs for bugs.\n"
# Same bare name as skills/languages/typescript.md; languages must win.
TYPESCRIPT_AGENT_MD = "# TypeScript Agent\n"


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def handbook(tmp_path):
    """Create a handbook root with base, skills and agents; return its path."""
    root = tmp_path / "handbook"
    _write(root / "base" / "CLAUDE.md", BASE_MD)
    _write(root / "skills" / "languages" / "typescript.md", TYPESCRIPT_MD)
    _write(root / "skills" / "languages" / "python.md", PYTHON_MD)
    _write(root / "skills" / "frameworks" / "nextjs.md", NEXTJS_MD)
    _write(root / "skills" / "infra" / "docker.md", DOCKER_MD)
    _write(root / "skills" / "practices" / "testing.md", TESTING_MD)
    _write(root / "agents" / "code-review.md", CODE_REVIEW_MD)
    _write(root / "agents" / "typescript.md", TYPESCRIPT_AGENT_MD)
    return root
