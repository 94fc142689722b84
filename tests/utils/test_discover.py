import os

import pytest

from snipcheck.errors import ReadError
from snipcheck.utils.discover import discover_documents, is_ignored, read_ignore_file


def _rel(paths, root):
    return [os.path.relpath(p, root).replace(os.sep, "/") for p in paths]


def test_discover_respects_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("build/\ndraft-*.md\n")
    (tmp_path / "learn.md").write_text("# a")
    (tmp_path / "draft-notes.md").write_text("# b")
    (tmp_path / "notes.txt").write_text("c")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "more.markdown").write_text("# d")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "copy.md").write_text("# e")

    found = discover_documents(str(tmp_path))
    assert _rel(found, tmp_path) == ["docs/more.markdown", "learn.md"]


def test_nested_gitignore_is_relative_to_its_directory(tmp_path):
    (tmp_path / "guide").mkdir()
    (tmp_path / "guide" / ".gitignore").write_text("/old.md\n")
    (tmp_path / "guide" / "old.md").write_text("# old")
    (tmp_path / "guide" / "new.md").write_text("# new")
    (tmp_path / "old.md").write_text("# top-level old is kept")

    found = discover_documents(str(tmp_path))
    assert _rel(found, tmp_path) == ["guide/new.md", "old.md"]


def test_parent_rules_apply_to_subdirectories(tmp_path):
    (tmp_path / ".gitignore").write_text("*.draft.md\n")
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "x.draft.md").write_text("# x")
    (tmp_path / "a" / "b" / "y.md").write_text("# y")

    assert _rel(discover_documents(str(tmp_path)), tmp_path) == ["a/b/y.md"]


def test_exclude_patterns_are_relative_to_root(tmp_path):
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "x.md").write_text("# x")
    (tmp_path / "keep.md").write_text("# k")

    found = discover_documents(str(tmp_path), exclude=["vendor/"])
    assert _rel(found, tmp_path) == ["keep.md"]


def test_git_directory_is_always_skipped(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "description.md").write_text("# git")
    (tmp_path / "learn.md").write_text("# a")

    assert _rel(discover_documents(str(tmp_path)), tmp_path) == ["learn.md"]


def test_discover_file_is_returned_as_is(tmp_path):
    doc = tmp_path / "x.md"
    doc.write_text("# x")
    assert discover_documents(str(doc)) == [str(doc)]


def test_read_ignore_file(tmp_path):
    assert read_ignore_file(str(tmp_path)) is None
    (tmp_path / ".gitignore").write_text("*.log\n")
    spec = read_ignore_file(str(tmp_path))
    assert spec.match_file("run.log")
    assert not spec.match_file("learn.md")


def test_unreadable_ignore_file_is_read_error(tmp_path):
    (tmp_path / ".gitignore").mkdir()
    assert read_ignore_file(str(tmp_path)) is None

    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / ".gitignore").write_text("x")
    os.chmod(tmp_path / "sub" / ".gitignore", 0)
    try:
        if os.access(tmp_path / "sub" / ".gitignore", os.R_OK):
            pytest.skip("running with permissions that bypass file modes")
        with pytest.raises(ReadError):
            read_ignore_file(str(tmp_path / "sub"))
    finally:
        os.chmod(tmp_path / "sub" / ".gitignore", 0o644)


def test_is_ignored_directory_patterns(tmp_path):
    (tmp_path / ".gitignore").write_text("build/\n")
    rules = [(str(tmp_path), read_ignore_file(str(tmp_path)))]
    assert is_ignored(str(tmp_path / "build"), rules, is_dir=True)
    assert not is_ignored(str(tmp_path / "build"), rules, is_dir=False)
