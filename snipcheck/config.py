# snipcheck/config.py
import os
import shlex
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .errors import ConfigError, ToolNotFound
from .system import which
from .utils.language import canonical_language, default_command

DEFAULT_TIMEOUT_MS = 5000


def _default_jobs() -> int:
    return os.cpu_count() or 1


@dataclass
class CheckConfig:
    """Options for one checker run; mirrors the command-line flags."""

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    jobs: int = 0  # 0 means os.cpu_count()
    language: Optional[str] = None
    tool: Union[str, Sequence[str], None] = None
    implicit_preamble: bool = True
    verbose: bool = False

    def __post_init__(self):
        if not self.jobs:
            self.jobs = _default_jobs()
        if self.language:
            self.language = canonical_language(self.language)

    def validate(self) -> "CheckConfig":
        if self.timeout_ms <= 0:
            raise ConfigError(f"--timeout-ms must be positive, got {self.timeout_ms}")
        if self.jobs <= 0:
            raise ConfigError(f"--jobs must be positive, got {self.jobs}")
        return self

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    def resolve_command(self, language: str) -> List[str]:
        """
        The collaborator argv for `language`: the explicit tool when given,
        otherwise the built-in default. The executable must exist.
        """
        if self.tool:
            argv = shlex.split(self.tool) if isinstance(self.tool, str) else list(self.tool)
        else:
            argv = default_command(language) or []
        if not argv:
            raise ToolNotFound(
                f"no default tool for language '{language}'; pass --tool"
            )
        if which(argv[0]) is None:
            raise ToolNotFound(f"tool '{argv[0]}' not found on PATH")
        return argv
