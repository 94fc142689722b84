"""
System helpers for materialising snippets and locating collaborator tools.

Public API:
  - write_tempfile(text: str, *, suffix: str = ".txt", prefix: str = "snippet-", dir: str | None = None, encoding: str = "utf-8") -> str
  - which(cmd: str) -> str | None
"""
from __future__ import annotations

import contextlib
import os
import tempfile

__all__ = ["write_tempfile", "which"]


def write_tempfile(
    text: str,
    *,
    suffix: str = ".txt",
    prefix: str = "snippet-",
    dir: str | None = None,
    encoding: str = "utf-8",
) -> str:
    """
    Write `text` to a new temporary file and return the absolute file path.
    The file persists after the call; callers own its removal.
    """
    if suffix and not suffix.startswith("."):
        suffix = f".{suffix}"
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=dir)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as f:
            f.write(text)
            if text and not text.endswith("\n"):
                f.write("\n")
    except Exception:
        with contextlib.suppress(OSError):
            os.remove(path)
        raise
    return os.path.realpath(path)


def which(cmd: str) -> str | None:
    """
    Resolve `cmd` to an executable path. Commands containing a path
    separator are checked directly; bare names are searched on PATH.
    """
    if os.path.dirname(cmd):
        return cmd if os.path.isfile(cmd) and os.access(cmd, os.X_OK) else None
    paths = os.environ.get("PATH", "").split(os.pathsep)
    exts = [""]
    if os.name == "nt":
        pathext = os.environ.get("PATHEXT", ".EXE;.BAT;.CMD").split(";")
        exts += [e.lower() for e in pathext if e]
    for folder in paths:
        if not folder:
            continue
        full = os.path.join(folder, cmd)
        for e in exts:
            candidate = full + e
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
    return None
