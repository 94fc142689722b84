import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .blocks import CodeBlock


class Status(str, enum.Enum):
    PASSED = "PASS"
    FAILED = "FAIL"
    SKIPPED = "SKIP"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one snippet; created once by the validator."""

    block: CodeBlock
    status: Status
    diagnostic: Optional[str] = None
    is_preamble: bool = False

    @property
    def success(self) -> Optional[bool]:
        """True when passed, False when failed, None when skipped."""
        if self.status is Status.SKIPPED:
            return None
        return self.status is Status.PASSED


@dataclass
class Report:
    """Per-document results in extraction order plus summary counts."""

    path: str
    language: Optional[str]
    results: List[ValidationResult] = field(default_factory=list)
    ignored: int = 0

    def _count(self, status: Status) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return self._count(Status.PASSED)

    @property
    def failed(self) -> int:
        return self._count(Status.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(Status.SKIPPED)

    @property
    def ok(self) -> bool:
        return not any(r.success is False for r in self.results)
