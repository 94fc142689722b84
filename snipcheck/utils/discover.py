# snipcheck/utils/discover.py
import os
from typing import Dict, List, Optional, Sequence, Tuple

import pathspec

from ..errors import ReadError

DOCUMENT_EXTENSIONS = (".md", ".markdown")
IGNORE_FILE = ".gitignore"

# (directory the patterns are relative to, compiled patterns)
Rule = Tuple[str, pathspec.PathSpec]


def _compile(lines: Sequence[str]) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def read_ignore_file(directory: str) -> Optional[pathspec.PathSpec]:
    """Patterns from `directory`/.gitignore, or None when there is none."""
    path = os.path.join(directory, IGNORE_FILE)
    if not os.path.isfile(path):
        return None
    try:
        with open(path, encoding="utf-8", errors="ignore") as f:
            return _compile(f.read().splitlines())
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e


def is_ignored(path: str, rules: Sequence[Rule], is_dir: bool = False) -> bool:
    """
    True when any rule matches `path`. Each rule's patterns are matched
    against the path relative to the directory that declared them, the way
    git reads a nested .gitignore.
    """
    for base, spec in rules:
        rel = os.path.relpath(path, base).replace(os.sep, "/")
        if is_dir:
            # Trailing '/' so directory patterns like 'build/' match
            rel += "/"
        if spec.match_file(rel):
            return True
    return False


def discover_documents(root: str, exclude: Sequence[str] = ()) -> List[str]:
    """
    Sorted markdown documents under `root`.

    `.git/` and the `exclude` patterns (relative to `root`) are always
    skipped, as is anything matched by a .gitignore in `root` or in a
    directory below it. A file path is returned as-is.
    """
    if os.path.isfile(root):
        return [root]

    base_rules: List[Rule] = [(root, _compile([".git/", *exclude]))]
    rules_by_dir: Dict[str, List[Rule]] = {}
    found: List[str] = []
    for current, dirs, files in os.walk(root):
        rules = rules_by_dir.pop(current, base_rules)
        own = read_ignore_file(current)
        if own is not None:
            rules = rules + [(current, own)]

        kept = []
        for d in sorted(dirs):
            full = os.path.join(current, d)
            if not is_ignored(full, rules, is_dir=True):
                kept.append(d)
                rules_by_dir[full] = rules
        dirs[:] = kept

        for name in sorted(files):
            if not name.lower().endswith(DOCUMENT_EXTENSIONS):
                continue
            full = os.path.join(current, name)
            if not is_ignored(full, rules):
                found.append(full)
    return sorted(found)
