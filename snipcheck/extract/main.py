# snipcheck/extract/main.py
from typing import Iterator, List, Optional

from .._logging import resolve_logger
from ..errors import MalformedBlock
from ..load import parse_document
from ..models import CodeBlock, Document, Fence
from .annotations import (
    collect_annotations,
    parse_info_string,
    preceding_comment_annotations,
)
from .fences import closes, iter_fences, strip_indent


def _build_block(document: Document, opener: Fence, closer: Fence) -> CodeBlock:
    body = list(document.lines[opener.line:closer.line - 1])
    body = strip_indent(body, opener.indent)
    language, extra, info_annotations = parse_info_string(opener.info)
    annotations = collect_annotations(
        info_annotations,
        preceding_comment_annotations(document, opener.line),
    )
    return CodeBlock(
        start_line=opener.line,
        end_line=closer.line,
        declared_language=language,
        raw_text="\n".join(line.rstrip("\r") for line in body),
        info=extra,
        annotations=annotations,
    )


def _scan(document: Document, log) -> Iterator[CodeBlock]:
    opener: Optional[Fence] = None
    for fence in iter_fences(document):
        if opener is None:
            opener = fence
            continue
        # No nesting: only a closer for the open block matters, anything
        # else between the fences is content.
        if closes(opener, fence):
            block = _build_block(document, opener, fence)
            log.debug(
                f"extracted block lines {block.line_range} "
                f"lang={block.declared_language or '-'}"
            )
            yield block
            opener = None
    if opener is not None:
        raise MalformedBlock(opener.line, path=document.path)


class BlockSequence:
    """
    Lazy, restartable view over the fenced blocks of a document.

    Each iteration rescans the (immutable) document, so two passes always
    yield identical blocks. MalformedBlock is raised when a pass reaches an
    unterminated fence.
    """

    def __init__(self, document: Document, logger=None, log: bool = False):
        self.document = document
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__)

    def __iter__(self) -> Iterator[CodeBlock]:
        return _scan(self.document, self._log)

    def __repr__(self) -> str:
        return f"BlockSequence({self.document.path!r})"


def extract_blocks(document: Document, logger=None, log: bool = False) -> BlockSequence:
    """Return the fenced code blocks of `document` as a restartable sequence."""
    return BlockSequence(document, logger=logger, log=log)


def extract_blocks_from_text(markdown_content: str) -> List[CodeBlock]:
    """Convenience wrapper: extract every block of an in-memory document."""
    return list(extract_blocks(parse_document(markdown_content)))


def count_fence_pairs(document: Document) -> int:
    """Number of opener/closer pairs; raises MalformedBlock like extraction does."""
    return sum(1 for _ in extract_blocks(document))
