from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class CodeBlock:
    """
    One fenced region of a document.

    `start_line` and `end_line` are the 1-based lines of the opening and
    closing fences; `raw_text` is everything strictly between them.
    """

    start_line: int
    end_line: int
    declared_language: str
    raw_text: str
    info: Tuple[str, ...] = ()
    annotations: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def line_range(self) -> str:
        return f"{self.start_line}-{self.end_line}"

    @property
    def is_tagged(self) -> bool:
        return bool(self.declared_language)
