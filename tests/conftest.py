"""Shared test fixtures for term-deps."""

import pytest

from helpers import TERM_HTML, write_dependencies


@pytest.fixture
def workspace(tmp_path):
    """A scripts/term_deps checkout: term.html one level up, node_modules inside."""
    tool_dir = tmp_path / "scripts" / "term_deps"
    tool_dir.mkdir(parents=True)
    html = tmp_path / "scripts" / "term.html"
    html.write_text(TERM_HTML, encoding="utf-8")
    write_dependencies(tool_dir / "node_modules")
    return tool_dir


@pytest.fixture
def html_path(workspace):
    return workspace.parent / "term.html"


@pytest.fixture
def deps_dir(workspace):
    return workspace / "node_modules"
