# snipcheck/normalize.py
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .extract.annotations import unknown_annotations
from .models import CodeBlock
from .utils.language import canonical_language

SKIP_MARKERS = frozenset({"skip", "fragment"})
NON_COMPILABLE = "non-compilable fragment"


@dataclass(frozen=True)
class Snippet:
    """A subject-language block together with the source that will be validated."""

    block: CodeBlock
    source: str
    is_preamble: bool = False
    skip_reason: Optional[str] = None


def _in_language(block: CodeBlock, language: Optional[str]) -> bool:
    return bool(language) and canonical_language(block.declared_language) == language


def skip_reason(block: CodeBlock) -> Optional[str]:
    """
    Why `block` must not be validated, or None.

    Unknown or contradictory annotations are ambiguous and skip the block.
    """
    unknown = unknown_annotations(block.annotations)
    if unknown:
        return f"unrecognized annotation '{unknown[0]}'"
    marks = block.annotations
    if "preamble" in marks and marks & (SKIP_MARKERS | {"standalone"}):
        return "conflicting annotations"
    if marks & SKIP_MARKERS:
        return NON_COMPILABLE
    return None


def find_preamble(
    blocks: Sequence[CodeBlock], language: Optional[str], implicit: bool = True
) -> Optional[CodeBlock]:
    """
    The document's single preamble: the first subject-language block marked
    `preamble`, else (when `implicit`) the first validatable one that is not
    `standalone`.
    """
    candidates = [b for b in blocks if _in_language(b, language)]
    for block in candidates:
        if "preamble" in block.annotations and skip_reason(block) is None:
            return block
    if not implicit:
        return None
    for block in candidates:
        if skip_reason(block) is None and "standalone" not in block.annotations:
            return block
    return None


def normalize_snippet(
    blocks: Sequence[CodeBlock],
    index: int,
    language: Optional[str],
    preamble: Optional[CodeBlock] = None,
) -> str:
    """
    Source for blocks[index]: the preamble followed by the block, or just the
    block when it is the preamble, comes before it, is standalone, or is not
    in `language`.
    """
    block = blocks[index]
    if (
        preamble is None
        or block.start_line <= preamble.start_line
        or "standalone" in block.annotations
        or not _in_language(block, language)
    ):
        return block.raw_text
    return preamble.raw_text.rstrip("\n") + "\n" + block.raw_text


def plan_snippets(
    blocks: Sequence[CodeBlock],
    language: Optional[str],
    implicit_preamble: bool = True,
) -> Tuple[List[Snippet], int]:
    """
    Normalize every subject-language block. Returns the snippets in document
    order and the number of blocks left out (untagged or another language).
    """
    blocks = list(blocks)
    preamble = find_preamble(blocks, language, implicit=implicit_preamble)
    snippets: List[Snippet] = []
    ignored = 0
    for i, block in enumerate(blocks):
        if not _in_language(block, language):
            ignored += 1
            continue
        reason = skip_reason(block)
        source = "" if reason else normalize_snippet(blocks, i, language, preamble)
        snippets.append(
            Snippet(
                block=block,
                source=source,
                is_preamble=block is preamble,
                skip_reason=reason,
            )
        )
    return snippets, ignored
