# snipcheck/extract/annotations.py
import re
from typing import FrozenSet, List, Tuple

from ..models import Document

# Values understood by the normalizer. Anything else is kept verbatim so the
# block can be failed closed later.
KNOWN_ANNOTATIONS = frozenset({"skip", "fragment", "preamble", "standalone"})

_INFO_TOKEN_RE = re.compile(r"^check=(?P<values>\S+)$")
_COMMENT_RE = re.compile(r"^\s*<!--\s*check:\s*(?P<values>[^>]*?)\s*-->\s*$")


def _split_values(values: str) -> List[str]:
    return [v.strip().lower() for v in values.split(",") if v.strip()]


def parse_info_string(info: str) -> Tuple[str, Tuple[str, ...], List[str]]:
    """
    Split a fence info string into (language, extra tokens, annotations).

    The language is the first token unless it is a `key=value` pair.
    `check=` tokens are consumed as annotations; other tokens are kept.
    """
    parts = info.split()
    language = ""
    if parts and "=" not in parts[0]:
        language = parts.pop(0).lower()
    extra: List[str] = []
    found: List[str] = []
    for part in parts:
        m = _INFO_TOKEN_RE.match(part)
        if m:
            found.extend(_split_values(m.group("values").strip("'\"")))
        else:
            extra.append(part)
    return language, tuple(extra), found


def preceding_comment_annotations(document: Document, fence_line: int) -> List[str]:
    """
    Read a `<!-- check: ... -->` comment on the nearest non-blank line above
    the fence on `fence_line` (1-based).
    """
    number = fence_line - 1
    while number >= 1 and not document.line(number).strip():
        number -= 1
    if number < 1:
        return []
    m = _COMMENT_RE.match(document.line(number))
    if not m:
        return []
    return _split_values(m.group("values"))


def collect_annotations(*sources: List[str]) -> FrozenSet[str]:
    merged: List[str] = []
    for source in sources:
        merged.extend(source)
    return frozenset(merged)


def unknown_annotations(annotations: FrozenSet[str]) -> List[str]:
    return sorted(a for a in annotations if a not in KNOWN_ANNOTATIONS)
