from .base import SnipcheckError


class ReadError(SnipcheckError):
    """The document could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read '{path}': {reason}")
        self.path = path
        self.reason = reason


class NotFound(ReadError):
    """The document path does not exist."""

    def __init__(self, path: str):
        super().__init__(path, "no such file")
