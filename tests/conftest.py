# conftest.py - shared fixtures
import shlex
import sys
import textwrap

import pytest


@pytest.fixture
def python_tool():
    """The running interpreter, used as the collaborator tool for python snippets."""
    return [sys.executable]


@pytest.fixture
def python_tool_string():
    return shlex.quote(sys.executable)


@pytest.fixture
def write_doc(tmp_path):
    """Write a dedented markdown document under tmp_path and return its path."""

    def _write(text: str, name: str = "doc.md") -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return str(path)

    return _write
