# snipcheck/extract/fences.py

from __future__ import annotations
import re
from typing import Iterator, Optional

from ..models import Document, Fence


# A fence line: optional indentation, a run of 3+ backticks, then an optional
# info string. Backticks inside the info string disqualify the line, as in
# CommonMark, so inline spans like ```foo``` are not fences.
_FENCE_RE = re.compile(r"^(?P<indent>[ \t]*)(?P<run>`{3,})(?P<info>[^`]*)$")


def parse_fence(line: str, number: int) -> Optional[Fence]:
    """Return a Fence for `line` or None when it is not a fence line."""
    m = _FENCE_RE.match(line.rstrip("\r"))
    if not m:
        return None
    return Fence(
        line=number,
        length=len(m.group("run")),
        info=m.group("info").strip(),
        indent=m.group("indent"),
    )


def iter_fences(document: Document) -> Iterator[Fence]:
    """Yield every fence-like line of `document` in order."""
    for number, line in enumerate(document.lines, start=1):
        fence = parse_fence(line, number)
        if fence is not None:
            yield fence


def closes(opener: Fence, candidate: Fence) -> bool:
    """A bare fence at least as long as the opener closes it."""
    return candidate.can_close and candidate.length >= opener.length


def strip_indent(lines: list[str], indent: str) -> list[str]:
    """Remove up to the opener's indentation from each content line."""
    if not indent:
        return lines
    out = []
    for line in lines:
        n = 0
        while n < len(indent) and n < len(line) and line[n] in " \t":
            n += 1
        out.append(line[n:])
    return out
