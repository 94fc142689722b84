from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Document:
    """An immutable, line-addressable view of a source document."""

    path: str
    lines: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.lines)

    def line(self, number: int) -> str:
        """Return the 1-based line `number`."""
        if number < 1 or number > len(self.lines):
            raise IndexError(f"line {number} outside 1..{len(self.lines)}")
        return self.lines[number - 1]
