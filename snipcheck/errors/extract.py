from .base import SnipcheckError


class MalformedBlock(SnipcheckError):
    """A fence was opened and never closed."""

    def __init__(self, line: int, path: str | None = None):
        where = f"{path}:{line}" if path else f"line {line}"
        super().__init__(f"unterminated code fence opened at {where}")
        self.line = line
        self.path = path
