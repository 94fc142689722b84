from dataclasses import dataclass


@dataclass(frozen=True)
class Fence:
    """A line made of a run of 3+ backticks, optionally followed by an info string."""
    line: int     # 1-based line number
    length: int   # backtick run length (>=3)
    info: str     # stripped text after the run; empty for a bare fence
    indent: str   # whitespace before the run

    @property
    def can_close(self) -> bool:
        return not self.info
